"""Bookshelf: a REST service for managing book records.

Routes HTTP CRUD requests under /api/books to a SQLModel-backed repository.
"""

__version__ = "0.1.0"
