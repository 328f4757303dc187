"""
pytest Fixtures for Library API Tests

This file contains shared fixtures used across all test files.

FIXTURE LAYOUT:
===============
- engine: fresh in-memory SQLite database per test, tables created
- db_session: session bound to that engine
- client: TestClient whose get_db dependency yields db_session
- sample_*: rows created directly through the ORM

Every test gets its own database, so services are free to commit and
roll back without affecting other tests.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
# Rate limiting is disabled and the module-level engine never touches disk.
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"

from collections.abc import Generator
from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from library_api.database import Base, get_db
from library_api.main import app
from library_api.models import Author, Book, Genre


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture(scope="function")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps a single connection alive; without it the in-memory
    database would disappear between connections.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """Create a session on the per-test database."""
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )
    session = TestSessionLocal()

    yield session

    session.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    We override the get_db dependency to use our test session.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_genre(db_session: Session) -> Genre:
    """Create a sample genre for testing."""
    genre = Genre(
        name="Fiction",
        description="Literary fiction.",
    )
    db_session.add(genre)
    db_session.commit()
    db_session.refresh(genre)
    return genre


@pytest.fixture
def second_genre(db_session: Session) -> Genre:
    genre = Genre(name="Romance", description="Romantic stories.")
    db_session.add(genre)
    db_session.commit()
    db_session.refresh(genre)
    return genre


@pytest.fixture
def sample_author(db_session: Session) -> Author:
    """Create a sample author for testing."""
    author = Author(
        first_name="Machado",
        last_name="de Assis",
        biography="Brazilian novelist, poet and playwright.",
        birth_date=date(1839, 6, 21),
        death_date=date(1908, 9, 29),
        nationality="Brazilian",
    )
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def second_author(db_session: Session) -> Author:
    author = Author(
        first_name="Clarice",
        last_name="Lispector",
        nationality="Brazilian",
    )
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def sample_book(
    db_session: Session,
    sample_author: Author,
    sample_genre: Genre,
) -> Book:
    """
    Create a sample book linked to sample_author and sample_genre.

    pytest resolves the author and genre fixtures first.
    """
    book = Book(
        title="Dom Casmurro",
        isbn="9788525406958",
        description="Classic Brazilian novel.",
        publication_date=date(1899, 1, 1),
        publisher="Globo",
        page_count=208,
        price=Decimal("29.90"),
        author_id=sample_author.id,
        genre_id=sample_genre.id,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def multiple_books(
    db_session: Session,
    sample_author: Author,
    sample_genre: Genre,
    second_author: Author,
    second_genre: Genre,
) -> list[Book]:
    """
    Create 15 books for pagination testing.

    Even-numbered books belong to sample_author, odd ones to second_author.
    Every third book is in second_genre, the rest in sample_genre.
    The first ten have an ISBN, the rest do not.
    """
    books = []
    for i in range(15):
        book = Book(
            title=f"Test Book {i + 1:02d}",
            isbn=f"97800000000{i:02d}" if i < 10 else None,
            description=f"Description for book {i + 1}",
            page_count=100 + i * 10,
            price=Decimal(f"{10 + i}.99"),
            author_id=sample_author.id if i % 2 == 0 else second_author.id,
            genre_id=second_genre.id if i % 3 == 0 else sample_genre.id,
        )
        books.append(book)
        db_session.add(book)

    db_session.commit()
    for book in books:
        db_session.refresh(book)

    return books


@pytest.fixture
def book_payload(sample_author: Author, sample_genre: Genre) -> dict:
    """Valid JSON body for POST/PUT /books."""
    return {
        "title": "A Hora da Estrela",
        "isbn": "9788520925188",
        "description": "Last novel by Clarice Lispector.",
        "publicationDate": "1977-01-01",
        "publisher": "Rocco",
        "pageCount": 87,
        "price": "24.90",
        "authorId": sample_author.id,
        "genreId": sample_genre.id,
    }
