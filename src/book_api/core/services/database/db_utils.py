"""Translation of SQLAlchemy failures into application errors."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from sqlmodel import Session

from src.book_api.core.exceptions import InvalidInputError, StoreUnavailableError


@contextmanager
def translate_store_errors(session: Session, operation: str) -> Iterator[None]:
    """Roll back and re-raise store failures as ``BookApiError`` subclasses.

    Constraint and data errors mean the store rejected the values we sent;
    anything else from SQLAlchemy means it could not do the work at all.
    """
    try:
        yield
    except (IntegrityError, DataError) as e:
        session.rollback()
        logger.bind(operation=operation, error_type=type(e).__name__).warning(
            "Store rejected data during {}", operation
        )
        raise InvalidInputError(
            "The data store rejected the submitted values",
            details=[str(e.orig) if e.orig is not None else str(e)],
        ) from e
    except SQLAlchemyError as e:
        session.rollback()
        logger.bind(operation=operation, error_type=type(e).__name__).error(
            "Store failure during {}: {}", operation, e
        )
        raise StoreUnavailableError() from e
