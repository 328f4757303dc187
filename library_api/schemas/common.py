"""
Response Envelopes

Every service operation returns one of two envelope types instead of
raising:

- ApiResponse[T]: a single item (or a boolean for delete/exists)
- PagedResponse[T]: one page of a list plus pagination metadata

Failures carry an ErrorKind alongside the human-readable message. The
routers pick the HTTP status from the kind; the kind itself is never
serialized into the response body.

JSON field names are camelCase (totalCount, hasNextPage, ...). Input
models accept both camelCase and snake_case.
"""

import math
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

DEFAULT_SUCCESS_MESSAGE = "Operation completed successfully"
DEFAULT_PAGED_MESSAGE = "Data retrieved successfully"


class ErrorKind(str, Enum):
    """
    Failure categories reported by the services.

    - NOT_FOUND: the requested identity does not exist
    - CONFLICT: a uniqueness rule would be violated
    - REFERENTIAL_INTEGRITY: a write references a missing author/genre,
      or a delete is blocked by dependent books
    - INTERNAL: unexpected storage fault
    """
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    REFERENTIAL_INTEGRITY = "referential_integrity"
    INTERNAL = "internal"


class CamelModel(BaseModel):
    """Base schema that reads and writes camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ApiResponse(CamelModel, Generic[T]):
    """
    Single-item result envelope.

    Example (success):
        {"success": true, "message": "Genre created successfully",
         "data": {...}, "errors": null}

    Example (failure):
        {"success": false, "message": "Genre not found",
         "data": null, "errors": null}
    """

    success: bool = Field(..., description="Whether the operation succeeded")
    message: str = Field(..., description="Human-readable outcome")
    data: T | None = Field(default=None, description="Operation payload")
    errors: list[str] | None = Field(
        default=None,
        description="Field-level error messages, when relevant",
    )

    error_kind: ErrorKind | None = Field(default=None, exclude=True)

    @classmethod
    def ok(cls, data: T, message: str = DEFAULT_SUCCESS_MESSAGE) -> "ApiResponse[T]":
        """Build a successful envelope around data."""
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(
        cls,
        kind: ErrorKind,
        message: str,
        errors: list[str] | None = None,
    ) -> "ApiResponse[T]":
        """Build a failed envelope tagged with kind."""
        return cls(success=False, message=message, errors=errors, error_kind=kind)


class PagedResponse(CamelModel, Generic[T]):
    """
    Paginated list result envelope.

    Pagination metadata:
    - totalCount: matching rows before pagination
    - totalPages: ceil(totalCount / pageSize), 0 for an empty result
    - hasPreviousPage: pageNumber > 1
    - hasNextPage: pageNumber < totalPages
    """

    success: bool
    message: str
    data: list[T] = Field(default_factory=list)
    total_count: int = Field(default=0, ge=0)
    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1)
    total_pages: int = Field(default=0, ge=0)
    has_previous_page: bool = False
    has_next_page: bool = False

    error_kind: ErrorKind | None = Field(default=None, exclude=True)

    @classmethod
    def create(
        cls,
        items: list[T],
        total_count: int,
        page_number: int,
        page_size: int,
        message: str = DEFAULT_PAGED_MESSAGE,
    ) -> "PagedResponse[T]":
        """Build a successful page and derive the pagination metadata."""
        total_pages = math.ceil(total_count / page_size) if total_count > 0 else 0
        return cls(
            success=True,
            message=message,
            data=items,
            total_count=total_count,
            page_number=page_number,
            page_size=page_size,
            total_pages=total_pages,
            has_previous_page=page_number > 1,
            has_next_page=page_number < total_pages,
        )

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "PagedResponse[T]":
        """Build a failed, empty page tagged with kind."""
        return cls(success=False, message=message, data=[], error_kind=kind)
