"""
API Routers Package

Router Structure:
- genres.py: /api/v1/genres/* endpoints
- authors.py: /api/v1/authors/* endpoints
- books.py: /api/v1/books/* endpoints

Each router is imported and registered in main.py.
"""

from library_api.routers.authors import router as authors_router
from library_api.routers.books import router as books_router
from library_api.routers.genres import router as genres_router

__all__ = [
    "genres_router",
    "authors_router",
    "books_router",
]
