"""
Service Operation Guard

Every public service function returns an envelope; none of them lets a
storage error escape. storage_guard() wraps a service function so that
any SQLAlchemyError raised inside it is:

1. Rolled back on the request session
2. Logged with its traceback
3. Replaced by a failure envelope with ErrorKind.INTERNAL and a generic
   message (no driver or SQL detail reaches the client)

Usage:
    @storage_guard("Error retrieving genre")
    def get_genre(db: Session, genre_id: int) -> ApiResponse[GenreRead]:
        ...
"""

import logging
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from library_api.schemas.common import ApiResponse, ErrorKind, PagedResponse

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def _find_session(args: tuple, kwargs: dict) -> Session | None:
    """Locate the Session argument of a service call (first positional or db=)."""
    candidate = kwargs.get("db", args[0] if args else None)
    return candidate if isinstance(candidate, Session) else None


def storage_guard(message: str, *, paged: bool = False) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Decorator factory converting storage faults into failure envelopes.

    Args:
        message: Generic failure message returned to the caller
        paged: Return a PagedResponse failure instead of an ApiResponse

    Returns:
        Decorator for a service function whose first argument is the Session
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return func(*args, **kwargs)
            except SQLAlchemyError as exc:
                db = _find_session(args, kwargs)
                if db is not None:
                    db.rollback()
                logger.error(f"{message} ({func.__name__}): {exc}", exc_info=True)
                if paged:
                    return PagedResponse.fail(ErrorKind.INTERNAL, message)
                return ApiResponse.fail(ErrorKind.INTERNAL, message)

        return wrapper

    return decorator
