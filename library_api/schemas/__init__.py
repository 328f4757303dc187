"""
Pydantic Schemas Package

Request/response validation models and the result envelopes.

Schema Naming Convention:
- XxxBase: Shared fields between create/update/read
- XxxCreate: Fields accepted when creating a new record
- XxxUpdate: Fields accepted when replacing a record (PUT)
- XxxRead: Fields returned in API responses, including derived values
- ApiResponse / PagedResponse: Envelopes wrapping every result
"""

from library_api.schemas.author import (
    AuthorBase,
    AuthorCreate,
    AuthorRead,
    AuthorUpdate,
)
from library_api.schemas.book import (
    BookBase,
    BookCreate,
    BookRead,
    BookUpdate,
)
from library_api.schemas.common import (
    ApiResponse,
    CamelModel,
    ErrorKind,
    PagedResponse,
)
from library_api.schemas.genre import (
    GenreBase,
    GenreCreate,
    GenreRead,
    GenreUpdate,
)

__all__ = [
    # Envelopes
    "ApiResponse",
    "PagedResponse",
    "ErrorKind",
    "CamelModel",
    # Author schemas
    "AuthorBase",
    "AuthorCreate",
    "AuthorUpdate",
    "AuthorRead",
    # Genre schemas
    "GenreBase",
    "GenreCreate",
    "GenreUpdate",
    "GenreRead",
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookRead",
]
