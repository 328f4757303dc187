"""
Book Service

Query and validation rules for books.

Business Rules:
- ISBN is unique when present; books without an ISBN never conflict
- author_id and genre_id must reference existing rows on create AND on
  update, even when they did not change
- Uniqueness is checked before the foreign keys
- author_name and genre_name are resolved from the related rows on read

Books have no dependents, so delete is unconditional.
"""

import logging
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from library_api.models import Author, Book, Genre
from library_api.schemas import (
    ApiResponse,
    BookCreate,
    BookRead,
    BookUpdate,
    ErrorKind,
    PagedResponse,
)
from library_api.services.guards import storage_guard
from library_api.services.pagination import PageRequest, apply_search, count_rows

logger = logging.getLogger(__name__)

BOOK_NOT_FOUND = "Book not found"


# =============================================================================
# Helpers
# =============================================================================
def _with_relations(stmt):
    """Eagerly load author and genre so the read view needs no extra queries."""
    return stmt.options(selectinload(Book.author), selectinload(Book.genre))


def _isbn_taken(db: Session, isbn: str | None, exclude_id: int | None = None) -> bool:
    """Check whether another book uses isbn. A missing ISBN is never taken."""
    if not isbn:
        return False
    stmt = select(Book.id).where(Book.isbn == isbn)
    if exclude_id is not None:
        stmt = stmt.where(Book.id != exclude_id)
    return db.execute(stmt.limit(1)).first() is not None


def _missing_reference(db: Session, book_data: BookCreate | BookUpdate) -> str | None:
    """
    Verify the referenced author and genre exist.

    Returns:
        None when both exist, otherwise the message naming the missing entity
    """
    if db.execute(select(Author.id).where(Author.id == book_data.author_id)).first() is None:
        return "Author not found"
    if db.execute(select(Genre.id).where(Genre.id == book_data.genre_id)).first() is None:
        return "Genre not found"
    return None


def _apply_fields(book: Book, book_data: BookCreate | BookUpdate) -> None:
    book.title = book_data.title
    book.isbn = book_data.isbn
    book.description = book_data.description
    book.publication_date = book_data.publication_date
    book.publisher = book_data.publisher
    book.page_count = book_data.page_count
    book.price = book_data.price
    book.author_id = book_data.author_id
    book.genre_id = book_data.genre_id


# =============================================================================
# Queries
# =============================================================================
@storage_guard("Error retrieving books", paged=True)
def list_books(
    db: Session,
    page_number: int | None = 1,
    page_size: int | None = None,
    search_term: str | None = None,
    author_id: int | None = None,
    genre_id: int | None = None,
) -> PagedResponse[BookRead]:
    """
    List books ordered by title.

    Filters (all optional, combined with AND):
    - search_term: substring of title, description, ISBN or publisher
    - author_id: only books by this author
    - genre_id: only books in this genre

    Args:
        db: Database session
        page_number: 1-based page (clamped to >= 1)
        page_size: Items per page (clamped to 1..max_page_size)
        search_term: Optional substring filter
        author_id: Optional author filter
        genre_id: Optional genre filter

    Returns:
        PagedResponse with BookRead items
    """
    page = PageRequest.clamp(page_number, page_size)

    stmt = apply_search(
        select(Book),
        search_term,
        Book.title,
        Book.description,
        Book.isbn,
        Book.publisher,
    )
    if author_id is not None:
        stmt = stmt.where(Book.author_id == author_id)
    if genre_id is not None:
        stmt = stmt.where(Book.genre_id == genre_id)

    total = count_rows(db, stmt)

    books = db.execute(
        _with_relations(stmt)
        .order_by(Book.title, Book.id)
        .offset(page.offset)
        .limit(page.size)
    ).scalars().all()

    items = [BookRead.model_validate(book) for book in books]
    return PagedResponse[BookRead].create(items, total, page.number, page.size)


@storage_guard("Error retrieving book")
def get_book(db: Session, book_id: int) -> ApiResponse[BookRead]:
    """Get a single book with its author and genre names."""
    stmt = _with_relations(select(Book).where(Book.id == book_id))
    book = db.execute(stmt).scalar_one_or_none()

    if book is None:
        return ApiResponse[BookRead].fail(ErrorKind.NOT_FOUND, BOOK_NOT_FOUND)

    return ApiResponse[BookRead].ok(BookRead.model_validate(book))


@storage_guard("Error checking book existence")
def book_exists(db: Session, book_id: int) -> ApiResponse[bool]:
    stmt = select(Book.id).where(Book.id == book_id)
    return ApiResponse[bool].ok(db.execute(stmt).first() is not None)


# =============================================================================
# Mutations
# =============================================================================
@storage_guard("Error creating book")
def create_book(db: Session, book_data: BookCreate) -> ApiResponse[BookRead]:
    """
    Create a new book.

    Failure cases (nothing is persisted):
    - CONFLICT: the ISBN is already used by another book
    - REFERENTIAL_INTEGRITY: author_id or genre_id does not exist
    """
    if _isbn_taken(db, book_data.isbn):
        return ApiResponse[BookRead].fail(
            ErrorKind.CONFLICT, "A book with this ISBN already exists"
        )

    missing = _missing_reference(db, book_data)
    if missing:
        return ApiResponse[BookRead].fail(ErrorKind.REFERENTIAL_INTEGRITY, missing)

    book = Book()
    _apply_fields(book, book_data)

    try:
        db.add(book)
        db.commit()
    except IntegrityError:
        db.rollback()
        return ApiResponse[BookRead].fail(
            ErrorKind.CONFLICT, "A book with this ISBN already exists"
        )
    db.refresh(book)

    logger.info(f"Created book {book.id} ('{book.title}')")
    return ApiResponse[BookRead].ok(BookRead.model_validate(book), "Book created successfully")


@storage_guard("Error updating book")
def update_book(
    db: Session,
    book_id: int,
    book_data: BookUpdate,
) -> ApiResponse[BookRead]:
    """
    Replace all mutable fields of a book, including its author and genre.

    Both references are re-validated on every update. The response
    carries the names of the (possibly new) author and genre.
    """
    book = db.get(Book, book_id)
    if book is None:
        return ApiResponse[BookRead].fail(ErrorKind.NOT_FOUND, BOOK_NOT_FOUND)

    if _isbn_taken(db, book_data.isbn, exclude_id=book_id):
        return ApiResponse[BookRead].fail(
            ErrorKind.CONFLICT, "Another book with this ISBN already exists"
        )

    missing = _missing_reference(db, book_data)
    if missing:
        return ApiResponse[BookRead].fail(ErrorKind.REFERENTIAL_INTEGRITY, missing)

    _apply_fields(book, book_data)
    book.updated_at = datetime.now(UTC)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return ApiResponse[BookRead].fail(
            ErrorKind.CONFLICT, "Another book with this ISBN already exists"
        )

    # Commit expired the instance; reload it with the current relations.
    book = db.execute(_with_relations(select(Book).where(Book.id == book_id))).scalar_one()

    logger.info(f"Updated book {book.id}")
    return ApiResponse[BookRead].ok(BookRead.model_validate(book), "Book updated successfully")


@storage_guard("Error deleting book")
def delete_book(db: Session, book_id: int) -> ApiResponse[bool]:
    """Delete a book. Nothing depends on books, so no extra checks apply."""
    book = db.get(Book, book_id)
    if book is None:
        return ApiResponse[bool].fail(ErrorKind.NOT_FOUND, BOOK_NOT_FOUND)

    db.delete(book)
    db.commit()

    logger.info(f"Deleted book {book_id}")
    return ApiResponse[bool].ok(True, "Book deleted successfully")
