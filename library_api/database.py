"""
Database Configuration Module

Sets up SQLAlchemy 2.0 for the Library API.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives -> create a new session
2. Use session for all database operations in that request
3. Services commit on success, roll back on failure
4. Close session when request ends

No session, connection or ORM object is shared between requests.
"""

import sqlite3
from collections.abc import Generator
from typing import Any

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from library_api.config import get_settings

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# SQLite connections are opened per thread by default; FastAPI runs sync
# routes in a thread pool, so the same-thread check must be disabled.
# Pool sizing only applies to server databases.

def build_engine_options(database_url: str) -> dict[str, Any]:
    """Return create_engine() keyword arguments suited to the database URL."""
    options: dict[str, Any] = {
        "pool_pre_ping": True,
        "echo": settings.debug,
    }
    if database_url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow
    return options


engine = create_engine(
    settings.database_url,
    **build_engine_options(settings.database_url),
)


def _unicode_lower(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


@event.listens_for(Engine, "connect")
def register_sqlite_functions(dbapi_connection, connection_record) -> None:
    """
    Replace SQLite's built-in lower() with Python's str.lower().

    The built-in only folds ASCII letters, so "FICÇÃO" would never match
    "ficção" in searches. Applies to every SQLite engine, including the
    ones tests create.
    """
    if isinstance(dbapi_connection, sqlite3.Connection):
        dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


# =============================================================================
# Session Factory
# =============================================================================
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic reads Base.metadata to discover tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Creates one session per request, yields it to the route handler and
    closes it when the request ends, even if the handler raised.

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables that do not exist yet.

    Used at startup when AUTO_CREATE_TABLES is on. In production, use
    Alembic migrations instead.
    """
    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Development and tests only.
    """
    Base.metadata.drop_all(bind=engine)
