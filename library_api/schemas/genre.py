"""
Genre Pydantic Schemas

Schemas for genre-related API operations.
Follows the same pattern as the Author schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from library_api.schemas.common import CamelModel


class GenreBase(CamelModel):
    """Base schema with shared genre fields."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Genre name",
        examples=["Science Fiction", "Mystery", "Romance"],
    )

    description: Optional[str] = Field(
        default=None,
        max_length=500,
        description="Description of the genre",
        examples=["Fiction dealing with futuristic science and technology"],
    )

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize genre name."""
        if not v.strip():
            raise ValueError("Genre name cannot be empty or whitespace")
        return v.strip()


class GenreCreate(GenreBase):
    """Schema for creating a new genre."""
    pass


class GenreUpdate(GenreBase):
    """
    Schema for updating an existing genre.

    Full replace: every field is written, so the same fields are
    required as on create. An omitted description clears it.
    """
    pass


class GenreRead(GenreBase):
    """Schema for genre responses."""

    id: int = Field(..., description="Unique identifier")
    created_at: datetime = Field(..., description="When the genre was created")
    updated_at: datetime = Field(..., description="When the genre was last updated")
    books_count: int = Field(
        default=0,
        ge=0,
        description="Number of books in this genre (computed on read)",
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Science Fiction",
                "description": "Fiction based on futuristic science and technology",
                "createdAt": "2024-01-15T10:30:00Z",
                "updatedAt": "2024-01-15T10:30:00Z",
                "booksCount": 3,
            }
        },
    )
