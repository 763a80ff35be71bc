"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.bookshelf.api.http.app_data import ApplicationDependencies
from src.bookshelf.core.services import DbSessionService
from src.bookshelf.entities.book import BookRepository


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a session scoped to the current request."""
    with database_service.session_scope() as session:
        yield session


def get_book_repository(db: Session = Depends(get_db_session)) -> BookRepository:
    return BookRepository(db)
