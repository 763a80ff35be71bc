"""Book API router with CRUD operations."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from src.bookshelf.api.http.deps import get_book_repository
from src.bookshelf.entities._base import BIGINT_MAX, BIGINT_MIN
from src.bookshelf.entities.book import Book, BookRepository

router = APIRouter(tags=["books"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Book not found"}}

BookId = Annotated[int, Path(ge=BIGINT_MIN, le=BIGINT_MAX)]


@router.get("", response_model=list[Book])
def list_books(
    repository: BookRepository = Depends(get_book_repository),
) -> list[Book]:
    """List all books."""
    return repository.find_all()


@router.get("/{book_id}", response_model=Book, responses=_NOT_FOUND)
def get_book(
    book_id: BookId,
    repository: BookRepository = Depends(get_book_repository),
):
    """Get a book by ID."""
    book = repository.find_by_id(book_id)
    if book is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return book


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(
    book: Book,
    repository: BookRepository = Depends(get_book_repository),
) -> Book:
    """Create a new book. Any id in the payload is ignored."""
    return repository.save(book.model_copy(update={"id": None}))


@router.put("/{book_id}", response_model=Book, responses=_NOT_FOUND)
def update_book(
    book_id: BookId,
    book_update: Book,
    repository: BookRepository = Depends(get_book_repository),
):
    """Overwrite title, author and year of an existing book."""
    existing = repository.find_by_id(book_id)
    if existing is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    existing.title = book_update.title
    existing.author = book_update.author
    existing.year_published = book_update.year_published
    return repository.save(existing)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
)
def delete_book(
    book_id: BookId,
    repository: BookRepository = Depends(get_book_repository),
) -> Response:
    """Delete a book."""
    if not repository.exists_by_id(book_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    repository.delete_by_id(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
