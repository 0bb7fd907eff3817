"""Repository tests using in-memory SQLite for fast, real database testing."""

import pytest
from sqlmodel import Session, select

from src.book_api.core.exceptions import NotFoundError
from src.book_api.entities.book import (
    MAX_BOOK_ID,
    BookInput,
    BookRepository,
    BookTable,
    BookUpdate,
)


class TestBookRepository:
    """Test Book repository operations."""

    @pytest.fixture
    def book_repo(self, session: Session) -> BookRepository:
        return BookRepository(session)

    @pytest.fixture
    def dune(self) -> BookInput:
        return BookInput(title="Dune", author="Herbert", published_year=1965)

    def test_create_book(self, book_repo: BookRepository, dune: BookInput, session: Session):
        created = book_repo.create(dune)

        assert created.id is not None
        assert created.title == "Dune"
        assert created.created_at is not None
        assert created.updated_at is not None
        assert session.get(BookTable, created.id) is not None

    def test_create_then_get(self, book_repo: BookRepository, dune: BookInput):
        created = book_repo.create(dune)

        fetched = book_repo.get(created.id)

        assert fetched == created
        assert fetched.author == "Herbert"
        assert fetched.published_year == 1965

    def test_get_nonexistent_book(self, book_repo: BookRepository):
        assert book_repo.get(12345) is None

    @pytest.mark.parametrize("book_id", [0, MAX_BOOK_ID + 1, 2**63])
    def test_out_of_range_id_is_not_found(self, book_repo: BookRepository, book_id: int):
        assert book_repo.get(book_id) is None
        with pytest.raises(NotFoundError, match="Book not found"):
            book_repo.update(book_id, BookUpdate(title="Missing"))
        with pytest.raises(NotFoundError, match="Book not found"):
            book_repo.delete(book_id)

    def test_list_all_in_id_order(self, book_repo: BookRepository):
        created = [
            book_repo.create(
                BookInput(title=f"Volume {n}", author="Anon", published_year=2000 + n)
            )
            for n in range(3)
        ]

        listed = book_repo.list_all()

        assert listed == created
        assert [b.id for b in listed] == sorted(b.id for b in listed)

    def test_update_book(self, book_repo: BookRepository, dune: BookInput):
        created = book_repo.create(dune)

        updated = book_repo.update(created.id, BookUpdate(author="Frank Herbert"))

        assert updated.id == created.id
        assert updated.author == "Frank Herbert"
        assert updated.title == "Dune"
        assert updated.created_at == created.created_at
        assert updated.updated_at > created.updated_at

    def test_update_nonexistent_book(self, book_repo: BookRepository):
        with pytest.raises(NotFoundError, match="Book not found"):
            book_repo.update(404, BookUpdate(title="Missing"))

    def test_delete_book(self, book_repo: BookRepository, dune: BookInput, session: Session):
        created = book_repo.create(dune)

        book_repo.delete(created.id)

        assert book_repo.get(created.id) is None
        assert session.exec(select(BookTable)).all() == []

    def test_delete_nonexistent_book(self, book_repo: BookRepository):
        with pytest.raises(NotFoundError):
            book_repo.delete(404)

    def test_ids_are_not_reused_within_listing(self, book_repo: BookRepository, dune: BookInput):
        first = book_repo.create(dune)
        second = book_repo.create(dune)

        assert first.id != second.id
        assert {b.id for b in book_repo.list_all()} == {first.id, second.id}
