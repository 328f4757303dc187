"""
Genre Model

Represents a book genre/category in the database.

Every book belongs to exactly one genre. A genre that still has books
cannot be deleted (the foreign key on books.genre_id is RESTRICT).
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from library_api.database import Base

if TYPE_CHECKING:
    from library_api.models.book import Book


def genre_name_key(name: str) -> str:
    """Normalized form of a genre name; equal keys mean the same genre."""
    return name.strip().casefold()


class Genre(Base):
    """
    Genre model representing book categories.

    Table: genres

    Relationships:
    - books: One-to-Many, books.genre_id points here

    Indexes:
    - Primary key on id (automatic)
    - name: For ordering and lookups
    - name_key: Unique, so names differing only in case collide

    Example:
        genre = Genre(
            name="Science Fiction",
            description="Fiction dealing with futuristic concepts...",
        )
    """

    __tablename__ = "genres"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    name: Mapped[str] = mapped_column(
        String(100),
        index=True,
        nullable=False,
        comment="Genre name (e.g., 'Science Fiction', 'Mystery')"
    )

    # Case-folded copy of name, kept in sync by _sync_name_key.
    name_key: Mapped[str] = mapped_column(
        String(300),
        unique=True,
        nullable=False,
        comment="Case-folded name used for uniqueness"
    )

    description: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
        comment="Description of what this genre encompasses"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    books: Mapped[List["Book"]] = relationship(
        "Book",
        back_populates="genre",
    )

    @validates("name")
    def _sync_name_key(self, key: str, value: str) -> str:
        self.name_key = genre_name_key(value)
        return value

    def __repr__(self) -> str:
        return f"Genre(id={self.id}, name='{self.name}')"
