"""
Test Suite for Library API

Test Organization:
- conftest.py: Shared fixtures (fresh store, client, sample data)
- test_books.py: Tests for /api/v1/books CRUD endpoints
- test_import.py: Tests for POST /api/v1/books/import
- test_app.py: Health, root, unknown routes and error handling
- test_store.py, test_validation.py, test_csv_import.py, test_importer.py,
  test_rate_limiter.py: Service-level tests without HTTP

Running Tests:
    # Run all tests
    pytest

    # Run with coverage
    pytest --cov=library_api --cov-report=html

    # Run specific file
    pytest tests/test_books.py
"""
