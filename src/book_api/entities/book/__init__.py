"""Entity package: Book."""

from .entity import Book, BookInput, BookUpdate
from .repository import BOOK_NOT_FOUND, MAX_BOOK_ID, BookRepository
from .table import BookTable

__all__ = [
    "BOOK_NOT_FOUND",
    "MAX_BOOK_ID",
    "Book",
    "BookInput",
    "BookRepository",
    "BookTable",
    "BookUpdate",
]
