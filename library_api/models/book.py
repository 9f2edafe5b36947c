"""
Book Models

Records live in process memory, so they are plain dataclasses rather
than ORM classes.

Book vs BookCandidate
=====================
- BookCandidate: the three content fields as received from the outside
  world. Fields are loosely typed on purpose; nothing has checked them yet.
- Book: a record that passed validation and was given an id by the store.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class BookCandidate:
    """Content fields of a book awaiting validation."""

    title: Any = None
    author: Any = None
    published_year: Any = None


@dataclass(frozen=True)
class Book:
    """
    A stored book record.

    Instances are immutable; an update replaces the record held by the
    store with a new Book carrying the same id.
    """

    id: str
    title: str
    author: str
    published_year: int

    @classmethod
    def from_candidate(cls, book_id: str, candidate: BookCandidate) -> "Book":
        """Build a record from an already validated candidate."""
        return cls(
            id=book_id,
            title=candidate.title,
            author=candidate.author,
            published_year=int(candidate.published_year),
        )
