"""
Pagination and Search Helpers

Shared by the genre, author and book services:

- PageRequest: clamped page number/size and the matching OFFSET
- apply_search(): case-insensitive substring search over text columns
- count_rows(): total matching rows before LIMIT/OFFSET

Non-positive page numbers and sizes are clamped rather than rejected:
pageNumber < 1 becomes 1, pageSize < 1 becomes 1 and pageSize above the
configured maximum becomes the maximum. The envelope reports the values
that were actually used.
"""

from dataclasses import dataclass

from sqlalchemy import Select, func, or_, select
from sqlalchemy.orm import Session

from library_api.config import get_settings

settings = get_settings()


@dataclass(frozen=True)
class PageRequest:
    """
    A validated page request.

    Attributes:
        number: 1-based page number
        size: Items per page
    """

    number: int
    size: int

    @classmethod
    def clamp(
        cls,
        page_number: int | None = 1,
        page_size: int | None = None,
        max_size: int | None = None,
    ) -> "PageRequest":
        """
        Build a PageRequest from raw client values.

        Args:
            page_number: Requested page (None means 1)
            page_size: Requested size (None means the configured default)
            max_size: Upper bound for size (defaults to settings.max_page_size)

        Returns:
            PageRequest with both values inside their valid ranges
        """
        if page_number is None:
            page_number = 1
        if page_size is None:
            page_size = settings.default_page_size
        if max_size is None:
            max_size = settings.max_page_size

        return cls(
            number=max(page_number, 1),
            size=min(max(page_size, 1), max_size),
        )

    @property
    def offset(self) -> int:
        """
        Number of rows to skip.

        Page 1 -> 0, page 2 -> size, page 3 -> 2 * size
        """
        return (self.number - 1) * self.size


def apply_search(stmt: Select, search_term: str | None, *columns) -> Select:
    """
    Restrict stmt to rows where any column contains search_term.

    Matching is a case-insensitive substring test. Both sides are folded
    with lower(); on SQLite that is the Unicode-aware version registered
    in library_api.database. LIKE wildcards in the
    term (% and _) are escaped, so they match literally. A None or blank
    term leaves the statement untouched.

    Args:
        stmt: SELECT statement to filter
        search_term: Raw term from the client
        *columns: Text columns to search; NULL columns never match

    Returns:
        The filtered statement
    """
    if search_term is None or not search_term.strip():
        return stmt

    term = search_term.strip().lower()
    return stmt.where(
        or_(*(func.lower(column).contains(term, autoescape=True) for column in columns))
    )


def count_rows(db: Session, stmt: Select) -> int:
    """Count the rows stmt would return, ignoring any ORDER BY/LIMIT."""
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    return db.execute(count_stmt).scalar() or 0
