"""
pytest Fixtures for Library API Tests

Every test gets its own empty BookStore. The client fixture injects it
through app.dependency_overrides, so tests never see each other's books
or the demo data.

The reference year is pinned to REFERENCE_YEAR so validation messages
are predictable regardless of the calendar.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SEED_DEMO_DATA"] = "false"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from library_api.dependencies import get_book_store, get_reference_year
from library_api.main import app
from library_api.models import Book, BookCandidate
from library_api.services.store import BookStore

REFERENCE_YEAR = 2024


# =============================================================================
# STORE AND CLIENT FIXTURES
# =============================================================================
@pytest.fixture
def store() -> BookStore:
    """A fresh, empty book store."""
    return BookStore()


@pytest.fixture
def reference_year() -> int:
    """The year validation treats as the current year."""
    return REFERENCE_YEAR


@pytest.fixture
def client(store: BookStore, reference_year: int) -> Generator[TestClient, None, None]:
    """
    Create a test client bound to the test store.

    We override the store and year dependencies; this is dependency
    injection in action.
    """
    app.dependency_overrides[get_book_store] = lambda: store
    app.dependency_overrides[get_reference_year] = lambda: reference_year

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_book(store: BookStore) -> Book:
    """Insert a single book."""
    return store.insert(
        BookCandidate(title="1984", author="George Orwell", published_year=1949)
    )


@pytest.fixture
def multiple_books(store: BookStore) -> list[Book]:
    """Insert several books in a known order."""
    return [
        store.insert(
            BookCandidate(
                title=f"Test Book {i + 1}",
                author=f"Author {i + 1}",
                published_year=1990 + i,
            )
        )
        for i in range(5)
    ]
