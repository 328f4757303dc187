"""
Author Pydantic Schemas

These schemas define the shape of data for Author-related API operations.

Pydantic v2 Features Used:
- model_config / ConfigDict: from_attributes for ORM objects
- Field(): Constraints and OpenAPI metadata
- field_validator: Trim names and reject whitespace-only values
"""

from datetime import date, datetime

from pydantic import ConfigDict, Field, field_validator

from library_api.schemas.common import CamelModel


class AuthorBase(CamelModel):
    """
    Base schema with shared author fields.

    Contains the fields common to create, update and response schemas,
    so the validation rules are declared once.
    """

    first_name: str = Field(
        ...,  # ... means required (no default)
        min_length=1,
        max_length=100,
        description="Author's given name",
        examples=["Machado", "Clarice"],
    )

    last_name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Author's family name",
        examples=["de Assis", "Lispector"],
    )

    biography: str | None = Field(
        default=None,
        max_length=1000,
        description="Author biography",
    )

    birth_date: date | None = Field(
        default=None,
        description="Date of birth",
        examples=["1839-06-21"],
    )

    death_date: date | None = Field(
        default=None,
        description="Date of death",
        examples=["1908-09-29"],
    )

    nationality: str | None = Field(
        default=None,
        max_length=100,
        description="Author nationality",
        examples=["Brazilian"],
    )

    @field_validator("first_name", "last_name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """
        Validate that a name part is not just whitespace.

        Args:
            v: The value being validated

        Returns:
            The value with surrounding whitespace removed

        Raises:
            ValueError: If the value is blank
        """
        if not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v.strip()


class AuthorCreate(AuthorBase):
    """
    Schema for creating a new author.

    Example request body:
    {
        "firstName": "Ana",
        "lastName": "Silva"
    }
    """
    pass


class AuthorUpdate(AuthorBase):
    """
    Schema for updating an existing author.

    PUT semantics: the payload replaces every mutable field.
    """
    pass


class AuthorRead(AuthorBase):
    """
    Schema for author responses (what the API returns).

    full_name comes from the model's full_name property and books_count
    is filled in by the service; neither is stored.
    """

    id: int = Field(
        ...,
        description="Unique identifier",
        examples=[1, 42],
    )

    full_name: str = Field(
        ...,
        description="First and last name",
        examples=["Machado de Assis"],
    )

    created_at: datetime = Field(
        ...,
        description="When the author was created",
    )

    updated_at: datetime = Field(
        ...,
        description="When the author was last updated",
    )

    books_count: int = Field(
        default=0,
        ge=0,
        description="Number of books by this author (computed on read)",
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "firstName": "Machado",
                "lastName": "de Assis",
                "fullName": "Machado de Assis",
                "biography": "Brazilian novelist, poet and playwright.",
                "birthDate": "1839-06-21",
                "deathDate": "1908-09-29",
                "nationality": "Brazilian",
                "createdAt": "2024-01-15T10:30:00Z",
                "updatedAt": "2024-01-15T10:30:00Z",
                "booksCount": 1,
            }
        },
    )
