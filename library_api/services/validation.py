"""
Book Validation Service

Checks candidate books before they reach the store.

validate_book() never raises for bad content. It returns a list of
human-readable messages, and an empty list means the candidate is
acceptable. Every rule is evaluated, so a caller sees all problems at once.

The reference year is a parameter instead of being read from the clock,
which keeps validation deterministic:

    errors = validate_book(candidate, current_year=2024)
"""

import math
import re
from typing import Any

from library_api.models import BookCandidate

TITLE_ERROR = "Title is required and must be a string"
AUTHOR_ERROR = "Author is required and must be a string"

# Leading optional sign and ASCII digits, after optional whitespace
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_year(value: Any) -> int | None:
    """
    Parse a loosely typed value as an integer year.

    Parsing is lenient in the same way for JSON bodies and CSV cells:
    - int: returned unchanged (bool is rejected)
    - float: truncated toward zero (NaN and infinity are rejected)
    - str: the leading run of ASCII digits is used, so "1999abc" -> 1999;
      a run too long to convert is rejected

    Args:
        value: Raw value from a request body or CSV field

    Returns:
        The parsed integer, or None if no integer could be read
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            try:
                return int(match.group(1))
            except ValueError:
                # digit run longer than the int/str conversion limit
                return None
    return None


def year_error(current_year: int) -> str:
    """Message for an out-of-range or unparseable published year."""
    return f"Published year must be a valid year between 1 and {current_year}"


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def validate_book(candidate: BookCandidate, current_year: int) -> list[str]:
    """
    Validate a candidate book.

    Rules:
    1. title must be a non-empty string
    2. author must be a non-empty string
    3. published_year must parse as an integer in 1..current_year

    Args:
        candidate: Unvalidated book fields
        current_year: Latest acceptable publication year

    Returns:
        List of error messages (empty if the candidate is valid)
    """
    errors: list[str] = []

    if not _is_non_empty_string(candidate.title):
        errors.append(TITLE_ERROR)

    if not _is_non_empty_string(candidate.author):
        errors.append(AUTHOR_ERROR)

    year = parse_year(candidate.published_year)
    if year is None or year <= 0 or year > current_year:
        errors.append(year_error(current_year))

    return errors
