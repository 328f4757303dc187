"""
Alembic Environment Configuration

Migrations for the library schema (genres, authors, books).

The database URL comes from library_api settings (DATABASE_URL), not
from alembic.ini, so the API and the migrations always target the same
database. Against SQLite, migrations run in batch mode because SQLite
cannot ALTER most column properties in place.

COMMANDS:
- alembic upgrade head                           # Apply all migrations
- alembic revision --autogenerate -m "message"  # Create migration
- alembic downgrade -1                           # Rollback one migration
- alembic current                                # Show current revision
"""

from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool

from alembic import context

from library_api.config import get_settings
from library_api.database import Base
from library_api.models import Author, Book, Genre  # noqa: F401 - registers tables on Base.metadata

settings = get_settings()

config = context.config
config.set_main_option("sqlalchemy.url", settings.database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _context_options() -> dict:
    """Options shared by offline and online runs."""
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "render_as_batch": settings.is_sqlite,
    }


def run_migrations_offline() -> None:
    """
    Emit SQL without connecting to the database.

    Usage:
        alembic upgrade head --sql > migration.sql
    """
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_context_options(),
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Connect to the database and apply migrations directly."""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(connection=connection, **_context_options())

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
