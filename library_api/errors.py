"""
Error Types

Services raise these exceptions instead of HTTPException so they stay
independent of the transport. Each error carries a ``kind`` tag; the
exception handlers registered in main.py translate the kind into an HTTP
status code and a JSON body.

Kinds:
- validation_error: one or more field-level violations (400)
- not_found: referenced book id does not exist (404)
- malformed_upload: bulk import payload missing or not CSV (400)
- upload_too_large: bulk import payload over the size limit (413)
"""


class LibraryError(Exception):
    """Base class for errors the API layer knows how to report."""

    kind = "library_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BookValidationError(LibraryError):
    """A candidate book failed validation."""

    kind = "validation_error"

    def __init__(self, errors: list[str]) -> None:
        super().__init__(f"Validation failed: {', '.join(errors)}")
        self.errors = list(errors)


class BookNotFoundError(LibraryError):
    """No book with the given id exists in the store."""

    kind = "not_found"

    def __init__(self, book_id: str) -> None:
        super().__init__("Book not found")
        self.book_id = book_id


class MalformedUploadError(LibraryError):
    """The uploaded import file was rejected before parsing."""

    kind = "malformed_upload"


class UploadTooLargeError(MalformedUploadError):
    """The uploaded import file exceeds the configured size limit."""

    kind = "upload_too_large"

    def __init__(self, limit: int) -> None:
        super().__init__(f"File too large. Maximum size is {limit} bytes")
        self.limit = limit
