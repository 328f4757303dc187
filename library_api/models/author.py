"""
Author Model

Represents an author in the library database.

SQLAlchemy 2.0 Features Used:
- mapped_column(): Columns with full type support
- Mapped[]: Type hint wrapper for SQLAlchemy columns
- relationship(): One-to-many link to Book
- back_populates: Two-way relationship binding
"""

from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import Date, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from library_api.database import Base

if TYPE_CHECKING:
    from library_api.models.book import Book


def author_name_key(first_name: str, last_name: str) -> str:
    """Normalized (first, last) pair; equal keys mean the same author."""
    return f"{first_name.strip()}\x1f{last_name.strip()}".casefold()


class Author(Base):
    """
    Author model representing writers in the system.

    Table: authors

    Relationships:
    - books: One-to-Many, books.author_id points here

    Indexes:
    - Primary key on id (automatic)
    - last_name: For searching authors by surname
    - name_key: Unique case-folded (first_name, last_name) pair

    Example:
        author = Author(
            first_name="Machado",
            last_name="de Assis",
            nationality="Brazilian",
        )
        db.add(author)
        db.commit()
    """

    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    first_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Author's given name"
    )

    last_name: Mapped[str] = mapped_column(
        String(100),
        index=True,
        nullable=False,
        comment="Author's family name"
    )

    # Kept in sync with first_name/last_name by _sync_name_key.
    name_key: Mapped[str] = mapped_column(
        String(600),
        unique=True,
        nullable=False,
        comment="Case-folded first and last name used for uniqueness"
    )

    biography: Mapped[str | None] = mapped_column(
        String(1000),
        nullable=True,
        comment="Author biography"
    )

    birth_date: Mapped[date | None] = mapped_column(
        Date,
        nullable=True,
    )

    death_date: Mapped[date | None] = mapped_column(
        Date,
        nullable=True,
    )

    nationality: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    # Set from the application clock so create and update share one source.
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
        comment="When the author record was created"
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
        comment="When the author record was last updated"
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    books: Mapped[list["Book"]] = relationship(
        "Book",
        back_populates="author",
    )

    # -------------------------------------------------------------------------
    # Derived Fields
    # -------------------------------------------------------------------------
    @validates("first_name", "last_name")
    def _sync_name_key(self, key: str, value: str) -> str:
        first_name = value if key == "first_name" else self.first_name
        last_name = value if key == "last_name" else self.last_name
        self.name_key = author_name_key(first_name or "", last_name or "")
        return value

    @property
    def full_name(self) -> str:
        """First and last name joined with a space. Never stored."""
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"Author(id={self.id}, name='{self.full_name}')"
