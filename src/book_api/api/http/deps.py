"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.book_api.api.http.app_data import ApplicationDependencies
from src.book_api.core.services import DbSessionService
from src.book_api.entities.book import BookRepository


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service built at startup."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Acquire a session for the duration of one request."""
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_book_repository(session: Session = Depends(get_session)) -> BookRepository:
    """Get a book repository bound to the request's session."""
    return BookRepository(session)
