"""
Book Pydantic Schemas

Handles:
- Mandatory author and genre references
- ISBN normalization (blank means "no ISBN")
- Price and page count ranges
"""

from datetime import date, datetime
from decimal import Decimal

from pydantic import ConfigDict, Field, field_validator

from library_api.schemas.common import CamelModel


class BookBase(CamelModel):
    """
    Base schema with shared book fields.

    Contains validation for:
    - Title (required, trimmed)
    - ISBN (trimmed, empty string becomes None)
    - Price (must be positive)
    - Page count (must be positive)
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Book title",
        examples=["Dom Casmurro", "A Hora da Estrela"],
    )

    isbn: str | None = Field(
        default=None,
        max_length=20,
        description="International Standard Book Number",
        examples=["9788525406958"],
    )

    description: str | None = Field(
        default=None,
        max_length=2000,
        description="Book description or summary",
    )

    publication_date: date | None = Field(
        default=None,
        description="Date of publication",
        examples=["1899-01-01"],
    )

    publisher: str | None = Field(
        default=None,
        max_length=100,
        description="Publishing house",
        examples=["Globo"],
    )

    page_count: int | None = Field(
        default=None,
        gt=0,  # gt = greater than
        description="Number of pages",
        examples=[208, 87],
    )

    price: Decimal | None = Field(
        default=None,
        ge=Decimal("0.01"),
        le=Decimal("99999999.99"),
        description="Book price",
        examples=["29.90", "24.90"],
    )

    author_id: int = Field(
        ...,
        description="ID of the book's author",
        examples=[1],
    )

    genre_id: int = Field(
        ...,
        description="ID of the book's genre",
        examples=[1],
    )

    @field_validator("isbn")
    @classmethod
    def blank_isbn_is_none(cls, v: str | None) -> str | None:
        """
        Normalize the ISBN.

        An empty or whitespace-only ISBN is treated as absent, so it can
        never collide with another book's missing ISBN. The ISBN-10 check
        character is stored upper-case, so "...x" and "...X" are the same.
        """
        if v is None:
            return v
        cleaned = v.strip().upper()
        return cleaned or None

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize title."""
        if not v.strip():
            raise ValueError("Title cannot be empty or whitespace")
        return v.strip()


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "Dom Casmurro",
        "isbn": "9788525406958",
        "authorId": 1,
        "genreId": 1
    }
    """
    pass


class BookUpdate(BookBase):
    """
    Schema for updating an existing book.

    Full replace: omitted optional fields are cleared, and authorId and
    genreId are always required and re-validated.
    """
    pass


class BookRead(BookBase):
    """
    Schema for book responses.

    author_name and genre_name are resolved from the related rows at
    read time, so they always reflect the current author and genre.
    """

    id: int = Field(..., description="Unique identifier")
    created_at: datetime = Field(..., description="When the book was created")
    updated_at: datetime = Field(..., description="When the book was last updated")
    author_name: str = Field(..., description="Full name of the author")
    genre_name: str = Field(..., description="Name of the genre")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Dom Casmurro",
                "isbn": "9788525406958",
                "description": "Classic Brazilian novel",
                "publicationDate": "1899-01-01",
                "publisher": "Globo",
                "pageCount": 208,
                "price": "29.90",
                "createdAt": "2024-01-15T10:30:00Z",
                "updatedAt": "2024-01-15T10:30:00Z",
                "authorId": 1,
                "authorName": "Machado de Assis",
                "genreId": 1,
                "genreName": "Fiction",
            }
        },
    )
