"""
Library API Application Package

CRUD web API for a small library domain: genres, authors and books.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and declarative base
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection (sessions, paging, filters)
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas and result envelopes
- services/: Query and validation core (one module per resource)
- routers/: API route handlers
- utils/: HTTP helpers shared by the routers
"""

__version__ = "0.1.0"
