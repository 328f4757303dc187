"""
SQLAlchemy Models Package

Database models for the Library API.

Model Relationships:
- Author <-> Book: One-to-Many (a book has exactly one author)
- Genre <-> Book: One-to-Many (a book has exactly one genre)

Importing every model here registers them with Base.metadata, which
Alembic and create_tables() rely on.
"""

from library_api.models.author import Author
from library_api.models.genre import Genre
from library_api.models.book import Book

__all__ = [
    "Author",
    "Genre",
    "Book",
]
