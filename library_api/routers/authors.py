"""
Authors Router

CRUD endpoints for authors.

Every endpoint returns the standard envelope. The HTTP status is taken
from the envelope's error kind (see utils.responses).
"""

from fastapi import APIRouter, Request, Response, status

from library_api.config import get_settings
from library_api.dependencies import DbSession, Pagination, SearchTerm
from library_api.schemas import (
    ApiResponse,
    ErrorKind,
    AuthorCreate,
    AuthorRead,
    AuthorUpdate,
    PagedResponse,
)
from library_api.services import authors as author_service
from library_api.services.rate_limiter import limiter
from library_api.utils.responses import status_for

settings = get_settings()

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
    responses={
        404: {"description": "Author not found"},
    },
)


@router.get(
    "",
    response_model=PagedResponse[AuthorRead],
    summary="List authors",
    description="Get a page of authors ordered by first and last name, optionally filtered by searchTerm.",
)
@limiter.limit(settings.rate_limit_default)
def list_authors(
    request: Request,
    response: Response,
    db: DbSession,
    pagination: Pagination,
    search_term: SearchTerm,
) -> PagedResponse[AuthorRead]:
    """List authors with their book counts."""
    result = author_service.list_authors(
        db,
        page_number=pagination.page_number,
        page_size=pagination.page_size,
        search_term=search_term,
    )
    response.status_code = status_for(result)
    return result


@router.get(
    "/{author_id}",
    response_model=ApiResponse[AuthorRead],
    summary="Get an author by ID",
)
@limiter.limit(settings.rate_limit_default)
def get_author(
    request: Request,
    response: Response,
    author_id: int,
    db: DbSession,
) -> ApiResponse[AuthorRead]:
    """Get a single author by ID."""
    result = author_service.get_author(db, author_id)
    response.status_code = status_for(result)
    return result


@router.head(
    "/{author_id}",
    summary="Check whether an author exists",
    description="200 if the author exists, 404 otherwise. No body.",
)
@limiter.limit(settings.rate_limit_default)
def author_exists(
    request: Request,
    author_id: int,
    db: DbSession,
) -> Response:
    result = author_service.author_exists(db, author_id)
    if not result.success:
        return Response(status_code=status_for(result))
    if not result.data:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_200_OK)


@router.post(
    "",
    response_model=ApiResponse[AuthorRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
    description="The first and last name pair is unique, ignoring case.",
)
@limiter.limit(settings.rate_limit_write)
def create_author(
    request: Request,
    response: Response,
    author_data: AuthorCreate,
    db: DbSession,
) -> ApiResponse[AuthorRead]:
    """
    Create a new author.

    On success the Location header points at the new author.
    """
    result = author_service.create_author(db, author_data)
    response.status_code = status_for(result, success_status=status.HTTP_201_CREATED)
    if result.success:
        response.headers["Location"] = str(
            request.url_for("get_author", author_id=result.data.id)
        )
    return result


@router.put(
    "/{author_id}",
    response_model=ApiResponse[AuthorRead],
    summary="Update an author",
    description="Replace all of the author's fields.",
)
@limiter.limit(settings.rate_limit_write)
def update_author(
    request: Request,
    response: Response,
    author_id: int,
    author_data: AuthorUpdate,
    db: DbSession,
) -> ApiResponse[AuthorRead]:
    """Update an existing author."""
    result = author_service.update_author(db, author_id, author_data)
    response.status_code = status_for(
        result,
        overrides={ErrorKind.REFERENTIAL_INTEGRITY: status.HTTP_404_NOT_FOUND},
    )
    return result


@router.delete(
    "/{author_id}",
    response_model=ApiResponse[bool],
    summary="Delete an author",
    description="Fails with 400 while the author still has books.",
)
@limiter.limit(settings.rate_limit_write)
def delete_author(
    request: Request,
    response: Response,
    author_id: int,
    db: DbSession,
) -> ApiResponse[bool]:
    """Delete an author."""
    result = author_service.delete_author(db, author_id)
    response.status_code = status_for(result)
    return result
