"""Book database table model."""

from src.bookshelf.entities._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books, with bookkeeping timestamps."""

    __tablename__ = "books"

    title: str
    author: str
    year_published: int | None = None
