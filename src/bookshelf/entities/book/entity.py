"""Entity: Book."""

from pydantic import Field, field_validator

from src.bookshelf.entities._base import INT_MAX, INT_MIN, Entity


class Book(Entity):
    """Book entity representing a book in the catalogue.

    Title and author must contain at least one non-whitespace character;
    the value itself is kept as submitted.
    """

    title: str = Field(description="Title")
    author: str = Field(description="Author")
    year_published: int | None = Field(
        default=None, ge=INT_MIN, le=INT_MAX, description="Year of publication"
    )

    @field_validator("title", "author")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value
