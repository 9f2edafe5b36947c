"""
Models Package

In-memory record types for the Library API.

- Book: an accepted record held by the BookStore
- BookCandidate: unvalidated content fields from a request body or CSV row

Import from here:
    from library_api.models import Book, BookCandidate
"""

from library_api.models.book import Book, BookCandidate

__all__ = [
    "Book",
    "BookCandidate",
]
