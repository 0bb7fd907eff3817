"""
Application error taxonomy.

Each error carries the HTTP status it is reported with; the API layer turns
them into ``{"error": message}`` responses.
"""

from typing import Any


class BookApiError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None, details: list[Any] | None = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class NotFoundError(BookApiError):
    """The requested entity does not exist."""

    status_code = 404
    default_message = "Not found"


class InvalidInputError(BookApiError):
    """The request or the data it carries was rejected."""

    status_code = 400
    default_message = "Invalid input"


class StoreUnavailableError(BookApiError):
    """The data store could not be reached or failed to answer."""

    status_code = 503
    default_message = "Data store unavailable"
