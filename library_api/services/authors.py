"""
Author Service

Query and validation rules for authors.

Business Rules:
- (first name, last name) is unique, compared case-insensitively
- An author that still has books cannot be deleted
- full_name and books_count are derived on read, never stored
"""

import logging
from datetime import UTC, datetime

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from library_api.models import Author, Book
from library_api.models.author import author_name_key
from library_api.schemas import (
    ApiResponse,
    AuthorCreate,
    AuthorRead,
    AuthorUpdate,
    ErrorKind,
    PagedResponse,
)
from library_api.services.guards import storage_guard
from library_api.services.pagination import PageRequest, apply_search, count_rows

logger = logging.getLogger(__name__)

AUTHOR_NOT_FOUND = "Author not found"


def _books_count_column():
    return (
        select(func.count(Book.id))
        .where(Book.author_id == Author.id)
        .correlate(Author)
        .scalar_subquery()
    )


def _count_books(db: Session, author_id: int) -> int:
    stmt = select(func.count(Book.id)).where(Book.author_id == author_id)
    return db.execute(stmt).scalar() or 0


def _to_read(author: Author, books_count: int) -> AuthorRead:
    return AuthorRead.model_validate(author).model_copy(update={"books_count": books_count})


def _name_taken(
    db: Session,
    first_name: str,
    last_name: str,
    exclude_id: int | None = None,
) -> bool:
    """Check whether another author has the same first/last name pair, ignoring case."""
    stmt = select(Author.id).where(Author.name_key == author_name_key(first_name, last_name))
    if exclude_id is not None:
        stmt = stmt.where(Author.id != exclude_id)
    return db.execute(stmt.limit(1)).first() is not None


def _apply_fields(author: Author, author_data: AuthorCreate | AuthorUpdate) -> None:
    author.first_name = author_data.first_name
    author.last_name = author_data.last_name
    author.biography = author_data.biography
    author.birth_date = author_data.birth_date
    author.death_date = author_data.death_date
    author.nationality = author_data.nationality


@storage_guard("Error retrieving authors", paged=True)
def list_authors(
    db: Session,
    page_number: int | None = 1,
    page_size: int | None = None,
    search_term: str | None = None,
) -> PagedResponse[AuthorRead]:
    """
    List authors ordered by first name, then last name.

    The search term is matched against first name, last name, biography
    and nationality.
    """
    page = PageRequest.clamp(page_number, page_size)

    stmt = apply_search(
        select(Author),
        search_term,
        Author.first_name,
        Author.last_name,
        Author.biography,
        Author.nationality,
    )
    total = count_rows(db, stmt)

    rows = db.execute(
        stmt.add_columns(_books_count_column())
        .order_by(Author.first_name, Author.last_name, Author.id)
        .offset(page.offset)
        .limit(page.size)
    ).all()

    items = [_to_read(author, books_count) for author, books_count in rows]
    return PagedResponse[AuthorRead].create(items, total, page.number, page.size)


@storage_guard("Error retrieving author")
def get_author(db: Session, author_id: int) -> ApiResponse[AuthorRead]:
    """Get a single author with full name and book count."""
    author = db.get(Author, author_id)
    if author is None:
        return ApiResponse[AuthorRead].fail(ErrorKind.NOT_FOUND, AUTHOR_NOT_FOUND)

    return ApiResponse[AuthorRead].ok(_to_read(author, _count_books(db, author.id)))


@storage_guard("Error checking author existence")
def author_exists(db: Session, author_id: int) -> ApiResponse[bool]:
    stmt = select(Author.id).where(Author.id == author_id)
    return ApiResponse[bool].ok(db.execute(stmt).first() is not None)


@storage_guard("Error creating author")
def create_author(db: Session, author_data: AuthorCreate) -> ApiResponse[AuthorRead]:
    """
    Create a new author.

    Example:
        create_author(db, AuthorCreate(first_name="Ana", last_name="Silva"))
        # data.full_name == "Ana Silva", data.books_count == 0
    """
    if _name_taken(db, author_data.first_name, author_data.last_name):
        return ApiResponse[AuthorRead].fail(
            ErrorKind.CONFLICT, "An author with this name already exists"
        )

    author = Author()
    _apply_fields(author, author_data)

    try:
        db.add(author)
        db.commit()
    except IntegrityError:
        db.rollback()
        return ApiResponse[AuthorRead].fail(
            ErrorKind.CONFLICT, "An author with this name already exists"
        )
    db.refresh(author)

    logger.info(f"Created author {author.id} ('{author.full_name}')")
    return ApiResponse[AuthorRead].ok(_to_read(author, 0), "Author created successfully")


@storage_guard("Error updating author")
def update_author(
    db: Session,
    author_id: int,
    author_data: AuthorUpdate,
) -> ApiResponse[AuthorRead]:
    """
    Replace all mutable fields of an author.

    Keeping the author's own name is allowed; taking another author's
    name is a CONFLICT.
    """
    author = db.get(Author, author_id)
    if author is None:
        return ApiResponse[AuthorRead].fail(ErrorKind.NOT_FOUND, AUTHOR_NOT_FOUND)

    if _name_taken(db, author_data.first_name, author_data.last_name, exclude_id=author_id):
        return ApiResponse[AuthorRead].fail(
            ErrorKind.CONFLICT, "Another author with this name already exists"
        )

    _apply_fields(author, author_data)
    author.updated_at = datetime.now(UTC)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return ApiResponse[AuthorRead].fail(
            ErrorKind.CONFLICT, "Another author with this name already exists"
        )
    db.refresh(author)

    logger.info(f"Updated author {author.id}")
    return ApiResponse[AuthorRead].ok(
        _to_read(author, _count_books(db, author.id)),
        "Author updated successfully",
    )


@storage_guard("Error deleting author")
def delete_author(db: Session, author_id: int) -> ApiResponse[bool]:
    """Delete an author, unless any book still references them."""
    stmt = (
        select(Author)
        .options(selectinload(Author.books))
        .where(Author.id == author_id)
    )
    author = db.execute(stmt).scalar_one_or_none()

    if author is None:
        return ApiResponse[bool].fail(ErrorKind.NOT_FOUND, AUTHOR_NOT_FOUND)

    if author.books:
        return ApiResponse[bool].fail(
            ErrorKind.REFERENTIAL_INTEGRITY,
            "Cannot delete an author that has associated books",
        )

    db.delete(author)
    db.commit()

    logger.info(f"Deleted author {author_id}")
    return ApiResponse[bool].ok(True, "Author deleted successfully")
