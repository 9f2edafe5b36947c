"""
Bulk Import Service

Coordinates parse -> validate -> insert for batch imports.

Each candidate is handled on its own: a row that fails validation is
reported and skipped, and the rest of the batch carries on. Rows inserted
before a failure stay in the store.
"""

import logging
from dataclasses import dataclass, field

from library_api.models import BookCandidate
from library_api.services.csv_import import parse_books_csv
from library_api.services.store import BookStore
from library_api.services.validation import validate_book

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """Outcome of a batch import."""

    added: int = 0
    errors: list[str] = field(default_factory=list)


def import_books(
    store: BookStore,
    candidates: list[BookCandidate],
    current_year: int,
) -> ImportResult:
    """
    Validate and insert a batch of candidate books.

    Rows are numbered from 1 in error messages:
        "Row 2: Title is required and must be a string"

    Args:
        store: Store that receives valid books
        candidates: Parsed candidates in input order
        current_year: Reference year for validation

    Returns:
        ImportResult with the number added and per-row error messages
    """
    result = ImportResult()

    for row_number, candidate in enumerate(candidates, start=1):
        errors = validate_book(candidate, current_year)
        if errors:
            message = f"Row {row_number}: {', '.join(errors)}"
            logger.debug(f"Rejected import row - {message}")
            result.errors.append(message)
            continue

        store.insert(candidate)
        result.added += 1

    logger.info(
        f"Import processed {len(candidates)} rows: "
        f"{result.added} added, {len(result.errors)} rejected"
    )
    return result


def import_csv(store: BookStore, csv_text: str, current_year: int) -> ImportResult:
    """Parse CSV text and import the resulting candidates."""
    return import_books(store, parse_books_csv(csv_text), current_year)
