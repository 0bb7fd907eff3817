"""Data-access layer for books."""

from loguru import logger
from sqlmodel import Session, select

from src.book_api.core.exceptions import NotFoundError
from src.book_api.core.services.database import translate_store_errors
from src.book_api.entities._base import utcnow

from .entity import Book, BookInput, BookUpdate
from .table import BookTable

BOOK_NOT_FOUND = "Book not found"

# Upper bound of a 32-bit INTEGER primary key, the narrowest supported backend.
MAX_BOOK_ID = 2**31 - 1


class BookRepository:
    """One store call per operation; rows never leave this class."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _find(self, book_id: int) -> BookTable | None:
        # Ids outside the column range were never issued; the driver would
        # overflow on them, so they are answered without a query.
        if not 1 <= book_id <= MAX_BOOK_ID:
            return None
        return self._session.get(BookTable, book_id)

    def list_all(self) -> list[Book]:
        with translate_store_errors(self._session, "list_books"):
            rows = self._session.exec(select(BookTable).order_by(BookTable.id)).all()
        return [Book.model_validate(row) for row in rows]

    def get(self, book_id: int) -> Book | None:
        with translate_store_errors(self._session, "get_book"):
            row = self._find(book_id)
        if row is None:
            return None
        return Book.model_validate(row)
    def create(self, data: BookInput) -> Book:
        row = BookTable(
            title=data.title,
            author=data.author,
            published_year=data.published_year,
        )
        with translate_store_errors(self._session, "create_book"):
            self._session.add(row)
            self._session.commit()
            self._session.refresh(row)
        logger.info("Created book {}", row.id)
        return Book.model_validate(row)

    def update(self, book_id: int, data: BookUpdate) -> Book:
        """Apply the provided fields and refresh ``updated_at``.

        Raises:
            NotFoundError: no book has ``book_id``.
        """
        with translate_store_errors(self._session, "update_book"):
            row = self._find(book_id)
            if row is None:
                raise NotFoundError(BOOK_NOT_FOUND)

            for field, value in data.changes().items():
                setattr(row, field, value)
            row.updated_at = utcnow()

            self._session.add(row)
            self._session.commit()
            self._session.refresh(row)
        logger.info("Updated book {}", book_id)
        return Book.model_validate(row)

    def delete(self, book_id: int) -> None:
        """Hard-delete a book.

        Raises:
            NotFoundError: no book has ``book_id``.
        """
        with translate_store_errors(self._session, "delete_book"):
            row = self._find(book_id)
            if row is None:
                raise NotFoundError(BOOK_NOT_FOUND)
            self._session.delete(row)
            self._session.commit()
        logger.info("Deleted book {}", book_id)
