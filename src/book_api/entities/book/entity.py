"""Entity: Book."""

from typing import Any

from pydantic import ConfigDict, Field, field_validator

from src.book_api.entities._base import ApiModel, Entity, utcnow

MIN_PUBLISHED_YEAR = 0


def _check_published_year(value: int) -> int:
    latest = utcnow().year + 1
    if value > latest:
        raise ValueError(f"publishedYear must not be later than {latest}")
    return value


class Book(Entity):
    """Book entity as returned by the API.

    Built from a ``BookTable`` row; ``id`` and both timestamps are always
    assigned by the store.
    """

    title: str = Field(description="Book title")
    author: str = Field(description="Book author")
    published_year: int = Field(description="Year of first publication")

    def __eq__(self, other: Any) -> bool:
        """Compare books by business attributes, ignoring timestamps."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.author == other.author
            and self.published_year == other.published_year
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.title,
            self.author,
            self.published_year,
        ))


class BookInput(ApiModel):
    """Payload for creating a book. All fields are required."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=255, description="Book title")
    author: str = Field(min_length=1, max_length=255, description="Book author")
    published_year: int = Field(
        ge=MIN_PUBLISHED_YEAR, description="Year of first publication"
    )

    @field_validator("published_year")
    @classmethod
    def published_year_not_in_future(cls, value: int) -> int:
        return _check_published_year(value)


class BookUpdate(ApiModel):
    """Payload for updating a book.

    Omitted fields keep their stored value; explicit nulls are rejected.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(
        default=None, min_length=1, max_length=255, description="Book title"
    )
    author: str | None = Field(
        default=None, min_length=1, max_length=255, description="Book author"
    )
    published_year: int | None = Field(
        default=None, ge=MIN_PUBLISHED_YEAR, description="Year of first publication"
    )

    @field_validator("title", "author", "published_year", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("must not be null")
        return value

    @field_validator("published_year")
    @classmethod
    def published_year_not_in_future(cls, value: int) -> int:
        return _check_published_year(value)

    def changes(self) -> dict[str, Any]:
        """Fields the caller actually sent, keyed by attribute name."""
        return self.model_dump(exclude_unset=True, by_alias=False)
