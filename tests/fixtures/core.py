from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import Engine, StaticPool
from sqlmodel import Session, SQLModel, create_engine

from src.book_api.core.services import DbSessionService

__all__ = [
    "app",
    "book_payload",
    "client",
    "create_book",
    "database_service",
    "engine",
    "session",
    "unavailable_database_service",
]


@pytest.fixture
def engine() -> Generator[Engine]:
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Import models to register them with the metadata
    from src.book_api.entities.book import BookTable  # noqa: F401

    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session]:
    with Session(engine, expire_on_commit=False) as session:
        try:
            yield session
        finally:
            session.rollback()


@pytest.fixture
def database_service(engine: Engine) -> DbSessionService:
    return DbSessionService(engine=engine)


@pytest.fixture
def unavailable_database_service(tmp_path) -> DbSessionService:
    """A store whose database file can never be opened."""
    engine = create_engine(f"sqlite:///{tmp_path}/missing/dir/books.db")
    return DbSessionService(engine=engine)


@pytest.fixture
def app(database_service: DbSessionService) -> FastAPI:
    from src.book_api.api.http.app import create_app

    return create_app(database_service=database_service)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient]:
    with TestClient(app) as client:
        yield client


@pytest.fixture
def book_payload() -> dict[str, Any]:
    return {"title": "Dune", "author": "Herbert", "publishedYear": 1965}


@pytest.fixture
def create_book(client: TestClient) -> Callable[..., dict[str, Any]]:
    """POST a book and return the created body."""

    def _create(title: str = "Dune", author: str = "Herbert", published_year: int = 1965):
        response = client.post(
            "/books",
            json={"title": title, "author": author, "publishedYear": published_year},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create
