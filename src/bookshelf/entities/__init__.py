"""Entities organized by business concept.

Each entity package holds its domain model (entity.py), persistence model
(table.py) and data-access layer (repository.py).
"""

from .book import Book, BookRepository, BookTable

__all__ = [
    "Book",
    "BookTable",
    "BookRepository",
]
