"""
Books Router

CRUD endpoints for books.

Endpoints:
- GET    /books            List books (pagination, searchTerm, authorId, genreId)
- GET    /books/{book_id}  Get one book with author and genre names
- HEAD   /books/{book_id}  Existence check
- POST   /books            Create a book
- PUT    /books/{book_id}  Replace a book
- DELETE /books/{book_id}  Delete a book

A missing author or genre is reported as 400 on POST and as 404 on PUT.
"""

from fastapi import APIRouter, Request, Response, status

from library_api.config import get_settings
from library_api.dependencies import BookFilters, DbSession, Pagination, SearchTerm
from library_api.schemas import (
    ApiResponse,
    BookCreate,
    BookRead,
    BookUpdate,
    ErrorKind,
    PagedResponse,
)
from library_api.services import books as book_service
from library_api.services.rate_limiter import limiter
from library_api.utils.responses import status_for

settings = get_settings()

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"description": "Book not found"},
    },
)


@router.get(
    "",
    response_model=PagedResponse[BookRead],
    summary="List books",
    description=(
        "Get a page of books ordered by title. searchTerm matches title, "
        "description, ISBN and publisher; authorId and genreId narrow the list."
    ),
)
@limiter.limit(settings.rate_limit_default)
def list_books(
    request: Request,
    response: Response,
    db: DbSession,
    pagination: Pagination,
    search_term: SearchTerm,
    filters: BookFilters,
) -> PagedResponse[BookRead]:
    """
    List books with pagination and optional filters.

    Examples:
    - GET /books?pageNumber=2&pageSize=5
    - GET /books?searchTerm=casmurro
    - GET /books?genreId=1
    """
    result = book_service.list_books(
        db,
        page_number=pagination.page_number,
        page_size=pagination.page_size,
        search_term=search_term,
        author_id=filters.author_id,
        genre_id=filters.genre_id,
    )
    response.status_code = status_for(result)
    return result


@router.get(
    "/{book_id}",
    response_model=ApiResponse[BookRead],
    summary="Get a book by ID",
)
@limiter.limit(settings.rate_limit_default)
def get_book(
    request: Request,
    response: Response,
    book_id: int,
    db: DbSession,
) -> ApiResponse[BookRead]:
    result = book_service.get_book(db, book_id)
    response.status_code = status_for(result)
    return result


@router.head(
    "/{book_id}",
    summary="Check whether a book exists",
)
@limiter.limit(settings.rate_limit_default)
def book_exists(
    request: Request,
    book_id: int,
    db: DbSession,
) -> Response:
    result = book_service.book_exists(db, book_id)
    if not result.success:
        return Response(status_code=status_for(result))
    return Response(
        status_code=status.HTTP_200_OK if result.data else status.HTTP_404_NOT_FOUND
    )


@router.post(
    "",
    response_model=ApiResponse[BookRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="authorId and genreId must exist; ISBN, when given, must be unique.",
)
@limiter.limit(settings.rate_limit_write)
def create_book(
    request: Request,
    response: Response,
    book_data: BookCreate,
    db: DbSession,
) -> ApiResponse[BookRead]:
    """
    Create a new book.

    Returns 400 if the ISBN is taken or the author/genre does not exist.
    """
    result = book_service.create_book(db, book_data)
    response.status_code = status_for(result, success_status=status.HTTP_201_CREATED)
    if result.success:
        response.headers["Location"] = str(
            request.url_for("get_book", book_id=result.data.id)
        )
    return result


@router.put(
    "/{book_id}",
    response_model=ApiResponse[BookRead],
    summary="Update a book",
    description="Replace every field of the book, including its author and genre.",
)
@limiter.limit(settings.rate_limit_write)
def update_book(
    request: Request,
    response: Response,
    book_id: int,
    book_data: BookUpdate,
    db: DbSession,
) -> ApiResponse[BookRead]:
    """
    Update an existing book.

    A missing book, author or genre all answer 404.
    """
    result = book_service.update_book(db, book_id, book_data)
    response.status_code = status_for(
        result,
        overrides={ErrorKind.REFERENTIAL_INTEGRITY: status.HTTP_404_NOT_FOUND},
    )
    return result


@router.delete(
    "/{book_id}",
    response_model=ApiResponse[bool],
    summary="Delete a book",
)
@limiter.limit(settings.rate_limit_write)
def delete_book(
    request: Request,
    response: Response,
    book_id: int,
    db: DbSession,
) -> ApiResponse[bool]:
    """Delete a book."""
    result = book_service.delete_book(db, book_id)
    response.status_code = status_for(result)
    return result
