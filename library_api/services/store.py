"""
Book Store Service

An in-memory keyed collection of books. Nothing is persisted; all data
is lost when the process exits.

PATTERN: Explicit Store Object
==============================
The store is created once in create_app() and handed to route handlers
through a FastAPI dependency (see dependencies.py). Tests build a fresh
BookStore per test and override that dependency.

Thread Safety
=============
FastAPI runs sync endpoints in a thread pool, so handlers may call the
store concurrently. Every read-then-write sequence runs under a lock.

The store does not validate. Callers run validate_book() first; the store
only assigns ids and keeps records in insertion order.
"""

import logging
import threading
import uuid

from library_api.errors import BookNotFoundError
from library_api.models import Book, BookCandidate

logger = logging.getLogger(__name__)

# Demonstration records inserted at startup when seed_demo_data is enabled
DEMO_BOOKS = [
    BookCandidate(title="To Kill a Mockingbird", author="Harper Lee", published_year=1960),
    BookCandidate(title="1984", author="George Orwell", published_year=1949),
]


class BookStore:
    """
    Process-local book storage.

    Usage:
        store = BookStore()
        book = store.insert(BookCandidate("Dune", "Frank Herbert", 1965))
        store.get(book.id)
    """

    def __init__(self) -> None:
        # dict preserves insertion order, which list() relies on
        self._books: dict[str, Book] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, book_id: object) -> bool:
        return book_id in self._books

    def list(self) -> list[Book]:
        """Return all books in insertion order."""
        with self._lock:
            return list(self._books.values())

    def get(self, book_id: str) -> Book:
        """
        Get a book by id.

        Raises:
            BookNotFoundError: If no book has this id
        """
        book = self._books.get(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    def insert(self, candidate: BookCandidate) -> Book:
        """
        Store a validated candidate under a freshly generated id.

        Args:
            candidate: Content fields that already passed validation

        Returns:
            The stored book
        """
        with self._lock:
            book_id = str(uuid.uuid4())
            while book_id in self._books:
                book_id = str(uuid.uuid4())
            book = Book.from_candidate(book_id, candidate)
            self._books[book_id] = book

        logger.debug(f"Inserted book {book_id}")
        return book

    def update(self, book_id: str, candidate: BookCandidate) -> Book:
        """
        Replace all content fields of an existing book.

        The id and the book's position in list() are preserved.

        Raises:
            BookNotFoundError: If no book has this id (store is unchanged)
        """
        with self._lock:
            if book_id not in self._books:
                raise BookNotFoundError(book_id)
            book = Book.from_candidate(book_id, candidate)
            self._books[book_id] = book

        logger.debug(f"Updated book {book_id}")
        return book

    def delete(self, book_id: str) -> None:
        """
        Remove a book.

        Raises:
            BookNotFoundError: If no book has this id
        """
        with self._lock:
            if self._books.pop(book_id, None) is None:
                raise BookNotFoundError(book_id)

        logger.debug(f"Deleted book {book_id}")

    def clear(self) -> None:
        """Remove every book."""
        with self._lock:
            self._books.clear()


def seed_demo_books(store: BookStore) -> list[Book]:
    """
    Insert the demonstration dataset into a store.

    Returns:
        The inserted books
    """
    books = [store.insert(candidate) for candidate in DEMO_BOOKS]
    logger.info(f"Seeded {len(books)} demo books")
    return books
