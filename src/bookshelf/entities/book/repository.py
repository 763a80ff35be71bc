"""Book repository."""

from datetime import UTC, datetime

from loguru import logger
from sqlmodel import Session, select

from .entity import Book
from .table import BookTable


class BookRepository:
    """Data-access layer for books.

    Each write commits its own transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_all(self) -> list[Book]:
        rows = self._session.exec(select(BookTable)).all()
        return [Book.model_validate(row, from_attributes=True) for row in rows]

    def find_by_id(self, book_id: int) -> Book | None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return None
        return Book.model_validate(row, from_attributes=True)

    def exists_by_id(self, book_id: int) -> bool:
        statement = select(BookTable.id).where(BookTable.id == book_id)
        return self._session.exec(statement).first() is not None

    def save(self, book: Book) -> Book:
        """Insert the book when it has no id, otherwise update the stored row.

        A book carrying an id that is not stored yet is inserted with that id.
        """
        row = None if book.id is None else self._session.get(BookTable, book.id)
        if row is None:
            row = BookTable(**book.model_dump(exclude={"id"} if book.id is None else None))
            self._session.add(row)
        else:
            row.sqlmodel_update(book.model_dump(exclude={"id"}))
            row.updated_at = datetime.now(UTC)

        self._session.commit()
        self._session.refresh(row)
        logger.debug("Saved book {}", row.id)
        return Book.model_validate(row, from_attributes=True)

    def delete_by_id(self, book_id: int) -> None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return
        self._session.delete(row)
        self._session.commit()
        logger.debug("Deleted book {}", book_id)
