"""
Application Configuration Module

This module uses Pydantic Settings for type-safe configuration management.

Values are read from environment variables (case-insensitive) and fall
back to a local .env file, then to the defaults declared below. Invalid
values fail at startup, not in the middle of a request.

PATTERN: Settings Singleton
===========================
A single Settings instance is cached with @lru_cache, so the .env file is
read once and every module sees the same configuration.

Usage:
    from library_api.config import get_settings

    settings = get_settings()
    print(settings.app_name)
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Field(...) is used for documented settings with defaults.
    Every setting can be overridden with an environment variable of the
    same name, e.g. DATABASE_URL or RATE_LIMIT_ENABLED.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="Library API",
        description="Application name displayed in docs and logs"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (detailed errors, SQL echo, auto-reload)"
    )
    api_version: str = Field(
        default="v1",
        description="API version for URL routing"
    )
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )
    port: int = Field(
        default=8000,
        description="Port to bind the server to"
    )
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )

    # -------------------------------------------------------------------------
    # Database Settings
    # -------------------------------------------------------------------------
    database_url: str = Field(
        default="sqlite:///./library.db",
        description="SQLAlchemy connection URL (SQLite or PostgreSQL)"
    )
    db_pool_size: int = Field(
        default=5,
        description="Number of permanent database connections (ignored for SQLite)"
    )
    db_max_overflow: int = Field(
        default=10,
        description="Maximum additional connections during high load (ignored for SQLite)"
    )
    auto_create_tables: bool = Field(
        default=True,
        description="Create missing tables at startup (use Alembic in production)"
    )

    # -------------------------------------------------------------------------
    # Pagination Settings
    # -------------------------------------------------------------------------
    default_page_size: int = Field(
        default=10,
        ge=1,
        description="Page size used when the client does not send one"
    )
    max_page_size: int = Field(
        default=100,
        ge=1,
        description="Upper bound applied to client supplied page sizes"
    )

    # -------------------------------------------------------------------------
    # Rate Limiting Settings
    # -------------------------------------------------------------------------
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable request rate limiting"
    )
    rate_limit_storage_uri: str = Field(
        default="memory://",
        description="slowapi/limits storage backend URI"
    )
    rate_limit_default: str = Field(
        default="100/minute",
        description="Limit applied to read endpoints"
    )
    rate_limit_write: str = Field(
        default="30/minute",
        description="Limit applied to create, update and delete endpoints"
    )

    # -------------------------------------------------------------------------
    # CORS Settings
    # -------------------------------------------------------------------------
    allowed_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins"
    )

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    @property
    def is_sqlite(self) -> bool:
        """True when the configured database is SQLite."""
        return self.database_url.startswith("sqlite")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate that log_level is a valid Python logging level.

        Args:
            v: The value to validate

        Returns:
            The validated value (uppercase)

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        valid_envs = {"development", "staging", "production"}
        if v.lower() not in valid_envs:
            raise ValueError(f"environment must be one of {valid_envs}")
        return v.lower()


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    The first call builds Settings (reading .env and validating values);
    later calls return the same instance.

    Returns:
        Cached Settings instance
    """
    return Settings()
