"""
Books Router

CRUD endpoints for books plus bulk import from CSV.

Handlers stay thin: they turn HTTP input into candidates, call the
services, and raise LibraryError subclasses. The exception handlers in
main.py turn those errors into responses.
"""

import logging

from fastapi import APIRouter, File, Request, UploadFile, status

from library_api.config import get_settings
from library_api.dependencies import AppSettings, CurrentYear, Store
from library_api.errors import (
    BookValidationError,
    MalformedUploadError,
    UploadTooLargeError,
)
from library_api.schemas import (
    BookInput,
    BookResponse,
    ErrorResponse,
    ImportSummary,
    ValidationErrorResponse,
)
from library_api.services.csv_import import decode_csv_payload
from library_api.services.importer import import_csv
from library_api.services.rate_limiter import limiter
from library_api.services.validation import validate_book

logger = logging.getLogger(__name__)
settings = get_settings()

CSV_CONTENT_TYPE = "text/csv"

# =============================================================================
# Router Configuration
# =============================================================================
router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"model": ErrorResponse, "description": "Book not found"},
    },
)


# =============================================================================
# Helper Functions
# =============================================================================
def is_csv_upload(file: UploadFile) -> bool:
    """
    Check whether an upload declares itself as CSV.

    Either the content type or the file extension is enough.
    """
    content_type = (file.content_type or "").split(";")[0].strip().lower()
    filename = (file.filename or "").lower()
    return content_type == CSV_CONTENT_TYPE or filename.endswith(".csv")


async def read_csv_upload(file: UploadFile | None, max_size: int) -> str:
    """
    Read and decode an uploaded CSV file.

    At most max_size + 1 bytes are read, which is enough to tell
    whether the file is over the limit.

    Args:
        file: The uploaded file, or None if the form had no file field
        max_size: Maximum accepted size in bytes

    Returns:
        Decoded file contents

    Raises:
        MalformedUploadError: If no file was sent or it is not CSV
        UploadTooLargeError: If the file exceeds max_size
    """
    if file is None:
        raise MalformedUploadError("No file uploaded")

    if not is_csv_upload(file):
        raise MalformedUploadError("Only CSV files are allowed")

    raw = await file.read(max_size + 1)
    if len(raw) > max_size:
        raise UploadTooLargeError(max_size)

    return decode_csv_payload(raw)


# =============================================================================
# CRUD Endpoints
# =============================================================================
@router.get(
    "",
    response_model=list[BookResponse],
    summary="List all books",
    description="Get every book in insertion order.",
)
@limiter.limit(settings.rate_limit_default)
def list_books(request: Request, store: Store) -> list[BookResponse]:
    """List all books."""
    return [BookResponse.model_validate(book) for book in store.list()]


@router.post(
    "/import",
    response_model=ImportSummary,
    summary="Import books from CSV",
    description=(
        "Upload a CSV file (form field 'file') with title, author and "
        "published year columns. Valid rows are added; invalid rows are "
        "reported per row."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Missing or non-CSV file"},
        413: {"model": ErrorResponse, "description": "File too large"},
    },
)
@limiter.limit(settings.rate_limit_write)
async def import_books_csv(
    request: Request,
    store: Store,
    current_year: CurrentYear,
    app_settings: AppSettings,
    file: UploadFile | None = File(default=None, description="CSV file to import"),
) -> ImportSummary:
    """
    Bulk import books from an uploaded CSV file.

    A bad row never aborts the batch. The response lists how many books
    were added and one error message per rejected row:

        {
            "message": "Import completed",
            "booksAdded": 2,
            "errors": ["Row 2: Author is required and must be a string"]
        }
    """
    csv_text = await read_csv_upload(file, app_settings.max_upload_size)
    logger.info(f"Importing books from {file.filename or 'upload'}")

    result = import_csv(store, csv_text, current_year)

    return ImportSummary(books_added=result.added, errors=result.errors)


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
    description="Retrieve a specific book.",
)
@limiter.limit(settings.rate_limit_default)
def get_book(request: Request, book_id: str, store: Store) -> BookResponse:
    """
    Get a single book by its ID.

    Raises:
        BookNotFoundError: 404 if book not found
    """
    return BookResponse.model_validate(store.get(book_id))


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Create a new book. The id is generated by the server.",
    responses={
        400: {"model": ValidationErrorResponse, "description": "Validation failed"},
    },
)
@limiter.limit(settings.rate_limit_write)
def create_book(
    request: Request,
    book_data: BookInput,
    store: Store,
    current_year: CurrentYear,
) -> BookResponse:
    """
    Create a new book.

    Raises:
        BookValidationError: 400 listing every failed rule
    """
    candidate = book_data.to_candidate()

    errors = validate_book(candidate, current_year)
    if errors:
        raise BookValidationError(errors)

    book = store.insert(candidate)
    logger.info(f"Created book {book.id}")
    return BookResponse.model_validate(book)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    description="Replace the title, author and published year of a book.",
    responses={
        400: {"model": ValidationErrorResponse, "description": "Validation failed"},
    },
)
@limiter.limit(settings.rate_limit_write)
def update_book(
    request: Request,
    book_id: str,
    book_data: BookInput,
    store: Store,
    current_year: CurrentYear,
) -> BookResponse:
    """
    Update an existing book.

    PUT semantics: all three content fields are replaced. The book must
    exist before the body is validated, so an unknown id is a 404 even
    when the body is also invalid.

    Raises:
        BookNotFoundError: 404 if book not found
        BookValidationError: 400 listing every failed rule
    """
    store.get(book_id)

    candidate = book_data.to_candidate()

    errors = validate_book(candidate, current_year)
    if errors:
        raise BookValidationError(errors)

    book = store.update(book_id, candidate)
    logger.info(f"Updated book {book_id}")
    return BookResponse.model_validate(book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    description="Permanently delete a book.",
)
@limiter.limit(settings.rate_limit_write)
def delete_book(request: Request, book_id: str, store: Store) -> None:
    """
    Delete a book.

    Returns 204 No Content on success.

    Raises:
        BookNotFoundError: 404 if book not found
    """
    store.delete(book_id)
    logger.info(f"Deleted book {book_id}")
