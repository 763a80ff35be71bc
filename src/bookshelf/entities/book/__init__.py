"""Book entity module.

- Book: Domain entity exchanged over the API
- BookTable: Database persistence model
- BookRepository: Data access layer
"""

from .entity import Book
from .repository import BookRepository
from .table import BookTable

__all__ = ["Book", "BookTable", "BookRepository"]
