"""Book API router with CRUD operations."""

from fastapi import APIRouter, Depends, Response, status

from src.book_api.api.http.deps import get_book_repository
from src.book_api.api.http.errors import (
    INVALID_INPUT_RESPONSE,
    NOT_FOUND_RESPONSE,
    STORE_UNAVAILABLE_RESPONSE,
)
from src.book_api.core.exceptions import NotFoundError
from src.book_api.entities.book import (
    BOOK_NOT_FOUND,
    Book,
    BookInput,
    BookRepository,
    BookUpdate,
)

router = APIRouter(
    prefix="/books", tags=["books"], responses=STORE_UNAVAILABLE_RESPONSE
)

BY_ID_RESPONSES = {**INVALID_INPUT_RESPONSE, **NOT_FOUND_RESPONSE}


@router.get("", response_model=list[Book], summary="Get all books")
def list_books(
    repository: BookRepository = Depends(get_book_repository),
) -> list[Book]:
    """List all books."""
    return repository.list_all()


@router.post(
    "",
    response_model=Book,
    status_code=status.HTTP_201_CREATED,
    responses=INVALID_INPUT_RESPONSE,
    summary="Create a new book",
)
def create_book(
    book: BookInput,
    repository: BookRepository = Depends(get_book_repository),
) -> Book:
    """Create a new book."""
    return repository.create(book)


@router.get(
    "/{book_id}",
    response_model=Book,
    responses=BY_ID_RESPONSES,
    summary="Get a book by ID",
)
def get_book(
    book_id: int,
    repository: BookRepository = Depends(get_book_repository),
) -> Book:
    """Get a book by ID."""
    book = repository.get(book_id)
    if book is None:
        raise NotFoundError(BOOK_NOT_FOUND)
    return book


@router.put(
    "/{book_id}",
    response_model=Book,
    responses=BY_ID_RESPONSES,
    summary="Update a book by ID",
)
def update_book(
    book_id: int,
    book_update: BookUpdate,
    repository: BookRepository = Depends(get_book_repository),
) -> Book:
    """Update the fields present in the body; the rest are left as they are."""
    return repository.update(book_id, book_update)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=BY_ID_RESPONSES,
    summary="Delete a book by ID",
)
def delete_book(
    book_id: int,
    repository: BookRepository = Depends(get_book_repository),
) -> Response:
    """Delete a book."""
    repository.delete(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
