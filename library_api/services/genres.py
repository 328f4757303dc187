"""
Genre Service

Query and validation rules for genres.

Business Rules:
- Genre names are unique, compared case-insensitively
- Renaming a genre to its own current name is not a conflict
- A genre that still has books cannot be deleted
- books_count is computed from the books table on every read

All functions take the request Session first and return an envelope;
none of them raise for domain failures.
"""

import logging
from datetime import UTC, datetime

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from library_api.models import Book, Genre
from library_api.models.genre import genre_name_key
from library_api.schemas import (
    ApiResponse,
    ErrorKind,
    GenreCreate,
    GenreRead,
    GenreUpdate,
    PagedResponse,
)
from library_api.services.guards import storage_guard
from library_api.services.pagination import PageRequest, apply_search, count_rows

logger = logging.getLogger(__name__)

GENRE_NOT_FOUND = "Genre not found"


# =============================================================================
# Helpers
# =============================================================================
def _books_count_column():
    """Correlated COUNT of books per genre, for use in a SELECT list."""
    return (
        select(func.count(Book.id))
        .where(Book.genre_id == Genre.id)
        .correlate(Genre)
        .scalar_subquery()
    )


def _count_books(db: Session, genre_id: int) -> int:
    stmt = select(func.count(Book.id)).where(Book.genre_id == genre_id)
    return db.execute(stmt).scalar() or 0


def _to_read(genre: Genre, books_count: int) -> GenreRead:
    return GenreRead.model_validate(genre).model_copy(update={"books_count": books_count})


def _name_taken(db: Session, name: str, exclude_id: int | None = None) -> bool:
    """
    Check whether another genre already uses name, ignoring case.

    Compares case-folded keys computed in Python, so the result does not
    depend on how the database folds non-ASCII letters.

    Args:
        db: Database session
        name: Candidate name
        exclude_id: Genre to ignore (the one being updated)
    """
    stmt = select(Genre.id).where(Genre.name_key == genre_name_key(name))
    if exclude_id is not None:
        stmt = stmt.where(Genre.id != exclude_id)
    return db.execute(stmt.limit(1)).first() is not None


# =============================================================================
# Queries
# =============================================================================
@storage_guard("Error retrieving genres", paged=True)
def list_genres(
    db: Session,
    page_number: int | None = 1,
    page_size: int | None = None,
    search_term: str | None = None,
) -> PagedResponse[GenreRead]:
    """
    List genres, one page at a time.

    The search term is matched against name and description. Results
    are ordered by name.

    Args:
        db: Database session
        page_number: 1-based page (clamped to >= 1)
        page_size: Items per page (clamped to 1..max_page_size)
        search_term: Optional substring filter

    Returns:
        PagedResponse with GenreRead items
    """
    page = PageRequest.clamp(page_number, page_size)

    stmt = apply_search(select(Genre), search_term, Genre.name, Genre.description)
    total = count_rows(db, stmt)

    rows = db.execute(
        stmt.add_columns(_books_count_column())
        .order_by(Genre.name, Genre.id)
        .offset(page.offset)
        .limit(page.size)
    ).all()

    items = [_to_read(genre, books_count) for genre, books_count in rows]
    return PagedResponse[GenreRead].create(items, total, page.number, page.size)


@storage_guard("Error retrieving genre")
def get_genre(db: Session, genre_id: int) -> ApiResponse[GenreRead]:
    """Get a single genre with its current book count."""
    genre = db.get(Genre, genre_id)
    if genre is None:
        return ApiResponse[GenreRead].fail(ErrorKind.NOT_FOUND, GENRE_NOT_FOUND)

    return ApiResponse[GenreRead].ok(_to_read(genre, _count_books(db, genre.id)))


@storage_guard("Error checking genre existence")
def genre_exists(db: Session, genre_id: int) -> ApiResponse[bool]:
    """Cheap existence probe, without loading the row."""
    stmt = select(Genre.id).where(Genre.id == genre_id)
    return ApiResponse[bool].ok(db.execute(stmt).first() is not None)


# =============================================================================
# Mutations
# =============================================================================
@storage_guard("Error creating genre")
def create_genre(db: Session, genre_data: GenreCreate) -> ApiResponse[GenreRead]:
    """
    Create a new genre.

    Fails with CONFLICT if a genre with the same name (ignoring case)
    already exists. A unique constraint violation raised by the database
    at commit time is reported the same way.
    """
    if _name_taken(db, genre_data.name):
        return ApiResponse[GenreRead].fail(
            ErrorKind.CONFLICT, "A genre with this name already exists"
        )

    genre = Genre(
        name=genre_data.name,
        description=genre_data.description,
    )

    try:
        db.add(genre)
        db.commit()
    except IntegrityError:
        db.rollback()
        return ApiResponse[GenreRead].fail(
            ErrorKind.CONFLICT, "A genre with this name already exists"
        )
    db.refresh(genre)

    logger.info(f"Created genre {genre.id} ('{genre.name}')")
    return ApiResponse[GenreRead].ok(_to_read(genre, 0), "Genre created successfully")


@storage_guard("Error updating genre")
def update_genre(
    db: Session,
    genre_id: int,
    genre_data: GenreUpdate,
) -> ApiResponse[GenreRead]:
    """
    Replace all mutable fields of a genre.

    The uniqueness check excludes the genre itself, so saving a genre
    with its current name succeeds. updated_at is always refreshed.
    """
    genre = db.get(Genre, genre_id)
    if genre is None:
        return ApiResponse[GenreRead].fail(ErrorKind.NOT_FOUND, GENRE_NOT_FOUND)

    if _name_taken(db, genre_data.name, exclude_id=genre_id):
        return ApiResponse[GenreRead].fail(
            ErrorKind.CONFLICT, "Another genre with this name already exists"
        )

    genre.name = genre_data.name
    genre.description = genre_data.description
    genre.updated_at = datetime.now(UTC)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return ApiResponse[GenreRead].fail(
            ErrorKind.CONFLICT, "Another genre with this name already exists"
        )
    db.refresh(genre)

    logger.info(f"Updated genre {genre.id}")
    return ApiResponse[GenreRead].ok(
        _to_read(genre, _count_books(db, genre.id)),
        "Genre updated successfully",
    )


@storage_guard("Error deleting genre")
def delete_genre(db: Session, genre_id: int) -> ApiResponse[bool]:
    """
    Delete a genre that has no books.

    Returns REFERENTIAL_INTEGRITY (and changes nothing) while any book
    still references the genre.
    """
    stmt = (
        select(Genre)
        .options(selectinload(Genre.books))
        .where(Genre.id == genre_id)
    )
    genre = db.execute(stmt).scalar_one_or_none()

    if genre is None:
        return ApiResponse[bool].fail(ErrorKind.NOT_FOUND, GENRE_NOT_FOUND)

    if genre.books:
        return ApiResponse[bool].fail(
            ErrorKind.REFERENTIAL_INTEGRITY,
            "Cannot delete a genre that has associated books",
        )

    db.delete(genre)
    db.commit()

    logger.info(f"Deleted genre {genre_id}")
    return ApiResponse[bool].ok(True, "Genre deleted successfully")
