"""
Test Suite for the Library API

Test Organization:
- conftest.py: Shared fixtures (per-test database, client, sample data)
- test_genres.py: Tests for /api/v1/genres endpoints
- test_authors.py: Tests for /api/v1/authors endpoints
- test_books.py: Tests for /api/v1/books endpoints
- test_pagination.py: Page math and clamping
- test_services.py: Service layer rules and storage error handling

Running Tests:
    pip install -e ".[test]"
    pytest
    pytest tests/test_books.py -v
"""
