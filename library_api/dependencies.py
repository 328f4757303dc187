"""
FastAPI Dependencies Module

Reusable pieces injected into route handlers with Depends():

- DbSession: per-request SQLAlchemy session
- Pagination: pageNumber/pageSize query parameters
- SearchTerm: optional searchTerm query parameter
- BookFilters: authorId/genreId filters for the book list

Pagination values are passed through unvalidated; the services clamp
them into range so that pageNumber=0 or pageSize=-5 still produce a
valid page instead of an error.
"""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from library_api.config import get_settings
from library_api.database import get_db

settings = get_settings()

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def list_books(db: Session = Depends(get_db)):
#
# You can write:
#   def list_books(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Pagination Parameters
# =============================================================================
class PaginationParams:
    """
    Common pagination parameters for list endpoints.

    Usage in route:
        @router.get("")
        def list_genres(db: DbSession, pagination: Pagination):
            return genre_service.list_genres(
                db, pagination.page_number, pagination.page_size
            )
    """

    def __init__(
        self,
        page_number: int = Query(
            default=1,
            alias="pageNumber",
            description="Page number (1-indexed, values below 1 are treated as 1)",
            examples=[1, 2, 3],
        ),
        page_size: int = Query(
            default=settings.default_page_size,
            alias="pageSize",
            description=f"Items per page (clamped to 1..{settings.max_page_size})",
            examples=[10, 25, 50],
        ),
    ) -> None:
        """
        Query() is used because these come from URL query parameters:
            GET /api/v1/books?pageNumber=2&pageSize=20
        """
        self.page_number = page_number
        self.page_size = page_size


Pagination = Annotated[PaginationParams, Depends()]


# =============================================================================
# Search
# =============================================================================
def get_search_term(
    search_term: str | None = Query(
        default=None,
        alias="searchTerm",
        max_length=100,
        description="Case-insensitive substring filter",
        examples=["machado", "romance"],
    ),
) -> str | None:
    """
    Common search parameter.

    A blank value is passed through; the services treat it as no filter.
    """
    return search_term


SearchTerm = Annotated[str | None, Depends(get_search_term)]


# =============================================================================
# Book Filters
# =============================================================================
class BookFilterParams:
    """
    Optional filters for the book list, combined with AND.

    Usage:
        GET /api/v1/books?authorId=1&genreId=2&searchTerm=casmurro
    """

    def __init__(
        self,
        author_id: int | None = Query(
            default=None,
            alias="authorId",
            description="Only books by this author",
        ),
        genre_id: int | None = Query(
            default=None,
            alias="genreId",
            description="Only books in this genre",
        ),
    ) -> None:
        self.author_id = author_id
        self.genre_id = genre_id


BookFilters = Annotated[BookFilterParams, Depends()]
