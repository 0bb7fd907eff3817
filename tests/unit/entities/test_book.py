"""Tests for the Book entity and its request models."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from src.book_api.entities.book import Book, BookInput, BookTable, BookUpdate


class TestBookEntity:
    """Test Book domain entity."""

    def test_book_from_table_row(self):
        row = BookTable(
            id=7,
            title="Dune",
            author="Herbert",
            published_year=1965,
            created_at=datetime(2024, 1, 1),
            updated_at=datetime(2024, 1, 2),
        )

        book = Book.model_validate(row)

        assert book.id == 7
        assert book.title == "Dune"
        assert book.published_year == 1965
        assert book.created_at == datetime(2024, 1, 1)
        assert book.updated_at == datetime(2024, 1, 2)

    def test_book_serializes_camel_case(self):
        book = Book(id=1, title="Dune", author="Herbert", published_year=1965)

        dumped = book.model_dump(by_alias=True)

        assert dumped["publishedYear"] == 1965
        assert "createdAt" in dumped
        assert "updatedAt" in dumped
        assert "published_year" not in dumped

    def test_book_equality_ignores_timestamps(self):
        """Should compare books by their business attributes, ignoring timestamps."""
        book1 = Book(
            id=1,
            title="Dune",
            author="Herbert",
            published_year=1965,
            created_at=datetime(2020, 1, 1),
        )
        book2 = Book(
            id=1,
            title="Dune",
            author="Herbert",
            published_year=1965,
            created_at=datetime(2024, 1, 1),
        )
        book3 = Book(id=2, title="Dune", author="Herbert", published_year=1965)

        assert book1 == book2
        assert hash(book1) == hash(book2)
        assert book1 != book3
        assert book1 != "Dune"


class TestBookInput:
    def test_accepts_camel_case(self):
        data = BookInput.model_validate(
            {"title": "Dune", "author": "Herbert", "publishedYear": 1965}
        )
        assert data.published_year == 1965

    def test_accepts_field_names(self):
        data = BookInput(title="Dune", author="Herbert", published_year=1965)
        assert data.title == "Dune"

    def test_strips_whitespace(self):
        data = BookInput(title="  Dune ", author="Herbert", published_year=1965)
        assert data.title == "Dune"

    @pytest.mark.parametrize(
        "payload",
        [
            {"author": "Herbert", "publishedYear": 1965},
            {"title": "", "author": "Herbert", "publishedYear": 1965},
            {"title": "Dune", "author": "  ", "publishedYear": 1965},
            {"title": "Dune", "author": "Herbert", "publishedYear": -5},
            {"title": "Dune", "author": "Herbert", "publishedYear": 12000},
            {"title": "Dune", "author": "Herbert", "publishedYear": "nineteen"},
            {"title": "x" * 256, "author": "Herbert", "publishedYear": 1965},
        ],
    )
    def test_rejects_invalid_payloads(self, payload):
        with pytest.raises(ValidationError):
            BookInput.model_validate(payload)


class TestBookUpdate:
    def test_changes_only_contains_sent_fields(self):
        update = BookUpdate.model_validate({"publishedYear": 1966})
        assert update.changes() == {"published_year": 1966}

    def test_empty_update(self):
        assert BookUpdate.model_validate({}).changes() == {}

    def test_rejects_explicit_null(self):
        with pytest.raises(ValidationError):
            BookUpdate.model_validate({"title": None})

    def test_rejects_future_year(self):
        with pytest.raises(ValidationError):
            BookUpdate.model_validate({"publishedYear": 12000})
