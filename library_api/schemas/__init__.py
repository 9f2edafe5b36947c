"""
Pydantic Schemas Package

Request/response models for the Library API.

Schema Naming Convention:
- XxxInput: Fields accepted in request bodies
- XxxResponse: Fields returned in API responses
"""

from library_api.schemas.book import (
    BookInput,
    BookResponse,
    ErrorResponse,
    ImportSummary,
    ValidationErrorResponse,
)

__all__ = [
    "BookInput",
    "BookResponse",
    "ImportSummary",
    "ErrorResponse",
    "ValidationErrorResponse",
]
