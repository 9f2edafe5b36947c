"""
Book Pydantic Schemas

Request bodies are deliberately loose: every field accepts any JSON value
so that validate_book() can report all problems with its own messages,
instead of FastAPI rejecting the body with a generic 422.

Wire format uses camelCase for the year:
    {"id": "...", "title": "1984", "author": "George Orwell", "publishedYear": 1949}
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from library_api.models import BookCandidate
from library_api.services.validation import parse_year


class BookInput(BaseModel):
    """
    Schema for create and update request bodies.

    PUT replaces all three content fields, so the same schema serves
    both operations.

    Example request body:
    {
        "title": "Dune",
        "author": "Frank Herbert",
        "publishedYear": 1965
    }
    """

    title: Any = Field(
        default=None,
        description="Book title",
        examples=["Dune"],
    )

    author: Any = Field(
        default=None,
        description="Book author",
        examples=["Frank Herbert"],
    )

    published_year: Any = Field(
        default=None,
        validation_alias=AliasChoices("publishedYear", "published_year"),
        description="Year of publication",
        examples=[1965],
    )

    model_config = ConfigDict(extra="ignore")

    def to_candidate(self) -> BookCandidate:
        """Convert the body to a candidate, parsing the year as an integer."""
        return BookCandidate(
            title=self.title,
            author=self.author,
            published_year=parse_year(self.published_year),
        )


class BookResponse(BaseModel):
    """Schema for book responses."""

    id: str = Field(..., description="Unique identifier (UUID)")
    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Book author")
    published_year: int = Field(
        ...,
        alias="publishedYear",
        description="Year of publication",
    )

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "3f1c1f5e-8f0b-4a1d-9d55-3c1b0c0e9a21",
                "title": "1984",
                "author": "George Orwell",
                "publishedYear": 1949,
            }
        },
    )


class ImportSummary(BaseModel):
    """
    Schema for bulk import responses.

    errors holds one message per rejected row, for example
    "Row 2: Published year must be a valid year between 1 and 2024".
    """

    message: str = Field(default="Import completed")
    books_added: int = Field(
        ...,
        ge=0,
        alias="booksAdded",
        description="Number of books inserted",
    )
    errors: list[str] = Field(
        default_factory=list,
        description="Per-row validation failures",
    )

    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str


class ValidationErrorResponse(ErrorResponse):
    """Schema for 400 responses listing each validation failure."""

    errors: list[str] = Field(default_factory=list)
