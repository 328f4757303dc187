"""
Genres Router

CRUD endpoints for genres.

Every endpoint returns the standard envelope. The HTTP status is taken
from the envelope's error kind (see utils.responses).
"""

from fastapi import APIRouter, Request, Response, status

from library_api.config import get_settings
from library_api.dependencies import DbSession, Pagination, SearchTerm
from library_api.schemas import (
    ApiResponse,
    ErrorKind,
    GenreCreate,
    GenreRead,
    GenreUpdate,
    PagedResponse,
)
from library_api.services import genres as genre_service
from library_api.services.rate_limiter import limiter
from library_api.utils.responses import status_for

settings = get_settings()

router = APIRouter(
    prefix="/genres",
    tags=["Genres"],
    responses={
        404: {"description": "Genre not found"},
    },
)


@router.get(
    "",
    response_model=PagedResponse[GenreRead],
    summary="List genres",
    description="Get a page of genres ordered by name, optionally filtered by searchTerm.",
)
@limiter.limit(settings.rate_limit_default)
def list_genres(
    request: Request,
    response: Response,
    db: DbSession,
    pagination: Pagination,
    search_term: SearchTerm,
) -> PagedResponse[GenreRead]:
    """List genres with their book counts."""
    result = genre_service.list_genres(
        db,
        page_number=pagination.page_number,
        page_size=pagination.page_size,
        search_term=search_term,
    )
    response.status_code = status_for(result)
    return result


@router.get(
    "/{genre_id}",
    response_model=ApiResponse[GenreRead],
    summary="Get a genre by ID",
)
@limiter.limit(settings.rate_limit_default)
def get_genre(
    request: Request,
    response: Response,
    genre_id: int,
    db: DbSession,
) -> ApiResponse[GenreRead]:
    """Get a single genre by ID."""
    result = genre_service.get_genre(db, genre_id)
    response.status_code = status_for(result)
    return result


@router.head(
    "/{genre_id}",
    summary="Check whether a genre exists",
    description="200 if the genre exists, 404 otherwise. No body.",
)
@limiter.limit(settings.rate_limit_default)
def genre_exists(
    request: Request,
    genre_id: int,
    db: DbSession,
) -> Response:
    result = genre_service.genre_exists(db, genre_id)
    if not result.success:
        return Response(status_code=status_for(result))
    if not result.data:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_200_OK)


@router.post(
    "",
    response_model=ApiResponse[GenreRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new genre",
    description="Genre names are unique, ignoring case.",
)
@limiter.limit(settings.rate_limit_write)
def create_genre(
    request: Request,
    response: Response,
    genre_data: GenreCreate,
    db: DbSession,
) -> ApiResponse[GenreRead]:
    """
    Create a new genre.

    On success the Location header points at the new genre.
    """
    result = genre_service.create_genre(db, genre_data)
    response.status_code = status_for(result, success_status=status.HTTP_201_CREATED)
    if result.success:
        response.headers["Location"] = str(
            request.url_for("get_genre", genre_id=result.data.id)
        )
    return result


@router.put(
    "/{genre_id}",
    response_model=ApiResponse[GenreRead],
    summary="Update a genre",
    description="Replace the genre's name and description.",
)
@limiter.limit(settings.rate_limit_write)
def update_genre(
    request: Request,
    response: Response,
    genre_id: int,
    genre_data: GenreUpdate,
    db: DbSession,
) -> ApiResponse[GenreRead]:
    """Update an existing genre."""
    result = genre_service.update_genre(db, genre_id, genre_data)
    response.status_code = status_for(
        result,
        overrides={ErrorKind.REFERENTIAL_INTEGRITY: status.HTTP_404_NOT_FOUND},
    )
    return result


@router.delete(
    "/{genre_id}",
    response_model=ApiResponse[bool],
    summary="Delete a genre",
    description="Fails with 400 while any book still belongs to the genre.",
)
@limiter.limit(settings.rate_limit_write)
def delete_genre(
    request: Request,
    response: Response,
    genre_id: int,
    db: DbSession,
) -> ApiResponse[bool]:
    """Delete a genre."""
    result = genre_service.delete_genre(db, genre_id)
    response.status_code = status_for(result)
    return result
