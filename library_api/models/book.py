"""
Book Model

The central model of the Library API.

Each book references exactly one author and one genre. Both foreign keys
are mandatory and use ON DELETE RESTRICT: an author or genre with books
cannot be removed out from under them.
"""

from datetime import UTC, date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import (
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from library_api.database import Base

if TYPE_CHECKING:
    from library_api.models.author import Author
    from library_api.models.genre import Genre


class Book(Base):
    """
    Book model representing books in the library.

    Table: books

    Fields:
    - title: Book title (required)
    - isbn: International Standard Book Number (unique when present)
    - description: Book summary/description
    - publication_date: When the book was published
    - publisher: Publishing house
    - page_count: Number of pages
    - price: Book price with 2 decimal precision

    Relationships:
    - author: Many-to-One (books.author_id -> authors.id)
    - genre: Many-to-One (books.genre_id -> genres.id)

    Example:
        book = Book(
            title="Dom Casmurro",
            isbn="9788525406958",
            publication_date=date(1899, 1, 1),
            page_count=208,
            price=Decimal("29.90"),
            author_id=1,
            genre_id=1,
        )
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    title: Mapped[str] = mapped_column(
        String(200),
        index=True,
        nullable=False,
        comment="Book title"
    )

    # NULLs never collide in a UNIQUE index, so any number of books may
    # have no ISBN.
    isbn: Mapped[str | None] = mapped_column(
        String(20),
        unique=True,
        index=True,
        nullable=True,
        comment="International Standard Book Number"
    )

    description: Mapped[str | None] = mapped_column(
        String(2000),
        nullable=True,
        comment="Book description or summary"
    )

    publication_date: Mapped[date | None] = mapped_column(
        Date,
        nullable=True,
        comment="Date of publication"
    )

    publisher: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
    )

    page_count: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Number of pages in the book"
    )

    # Numeric(10, 2): up to 99999999.99, kept as Decimal
    price: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2),
        nullable=True,
        comment="Book price"
    )

    # -------------------------------------------------------------------------
    # Foreign Keys
    # -------------------------------------------------------------------------
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("authors.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    genre_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("genres.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
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
    author: Mapped["Author"] = relationship("Author", back_populates="books")
    genre: Mapped["Genre"] = relationship("Genre", back_populates="books")

    # -------------------------------------------------------------------------
    # Derived Fields
    # -------------------------------------------------------------------------
    # Resolved through the relationships on every read, never stored.
    @property
    def author_name(self) -> str:
        return self.author.full_name

    @property
    def genre_name(self) -> str:
        return self.genre.name

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', isbn='{self.isbn}')"
