"""
Tests for Book Validation
"""

import pytest

from library_api.models import BookCandidate
from library_api.services.validation import (
    AUTHOR_ERROR,
    TITLE_ERROR,
    parse_year,
    validate_book,
    year_error,
)

YEAR = 2024


def candidate(**overrides) -> BookCandidate:
    fields = {"title": "Dune", "author": "Frank Herbert", "published_year": 1965}
    fields.update(overrides)
    return BookCandidate(**fields)


class TestValidateBook:
    def test_valid_candidate(self):
        assert validate_book(candidate(), YEAR) == []

    @pytest.mark.parametrize("title", [None, "", 42, ["Dune"]])
    def test_invalid_title(self, title):
        assert validate_book(candidate(title=title), YEAR) == [TITLE_ERROR]

    @pytest.mark.parametrize("author", [None, "", 3.5, {"name": "x"}])
    def test_invalid_author(self, author):
        assert validate_book(candidate(author=author), YEAR) == [AUTHOR_ERROR]

    @pytest.mark.parametrize("year", [1, 1965, YEAR, "2000"])
    def test_valid_years(self, year):
        assert validate_book(candidate(published_year=year), YEAR) == []

    @pytest.mark.parametrize("year", [0, -5, YEAR + 1, None, "abc", True])
    def test_invalid_years(self, year):
        assert validate_book(candidate(published_year=year), YEAR) == [
            "Published year must be a valid year between 1 and 2024"
        ]

    def test_message_embeds_reference_year(self):
        errors = validate_book(candidate(published_year=2030), 2031)

        assert errors == []
        assert validate_book(candidate(published_year=2030), 1999) == [year_error(1999)]
        assert "1999" in year_error(1999)

    def test_all_errors_collected(self):
        errors = validate_book(BookCandidate(), YEAR)

        assert errors == [TITLE_ERROR, AUTHOR_ERROR, year_error(YEAR)]


class TestParseYear:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (1999, 1999),
            ("1999", 1999),
            ("  1999 ", 1999),
            ("1999abc", 1999),
            ("-12", -12),
            ("+7", 7),
            (1999.9, 1999),
            ("abc", None),
            ("", None),
            (None, None),
            (True, None),
            (float("nan"), None),
            ([1999], None),
        ],
    )
    def test_parse_year(self, value, expected):
        assert parse_year(value) == expected

    def test_parse_year_non_ascii_digits(self):
        """Arabic-Indic digits are not read as a year."""
        assert parse_year("١٩٩٩") is None

    def test_parse_year_digit_run_too_long(self):
        """A digit run past the int conversion limit is rejected, not raised."""
        assert parse_year("9" * 5000) is None

    def test_validate_book_digit_run_too_long(self):
        errors = validate_book(candidate(published_year="9" * 5000), YEAR)

        assert errors == [year_error(YEAR)]
