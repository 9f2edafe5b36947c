"""
CSV Import Parser

Turns the text of an uploaded CSV file into candidate books.

Format
======
    Title,Author,Year          <- optional header row
    Dune,Frank Herbert,1965
    Neuromancer,William Gibson,1984

- The first line is treated as a header when it contains both "title"
  and "author" (case-insensitive).
- Blank lines are skipped.
- Fields are split on every comma and stripped. There is no quoting, so a
  comma inside a title always starts a new field.
- Columns beyond the third are ignored.
- Lines with fewer than three fields are dropped without an error.

The parser does not validate; it only produces BookCandidate objects for
validate_book() to check.
"""

from library_api.models import BookCandidate
from library_api.services.validation import parse_year


def decode_csv_payload(raw: bytes) -> str:
    """
    Decode uploaded file bytes as UTF-8.

    A leading byte-order mark is removed and undecodable bytes are
    replaced, so decoding never fails.
    """
    return raw.decode("utf-8-sig", errors="replace")


def has_header(line: str) -> bool:
    """Check whether a line looks like the title/author header row."""
    lowered = line.lower()
    return "title" in lowered and "author" in lowered


def parse_books_csv(csv_text: str) -> list[BookCandidate]:
    """
    Parse CSV text into candidate books.

    Args:
        csv_text: Full contents of the CSV file

    Returns:
        Candidates in input line order
    """
    lines = csv_text.split("\n")
    start = 1 if has_header(lines[0]) else 0

    candidates: list[BookCandidate] = []
    for line in lines[start:]:
        row = line.strip()
        if not row:
            continue

        columns = [column.strip() for column in row.split(",")]
        if len(columns) < 3:
            continue

        candidates.append(
            BookCandidate(
                title=columns[0],
                author=columns[1],
                published_year=parse_year(columns[2]),
            )
        )

    return candidates
