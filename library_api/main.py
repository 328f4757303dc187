"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app
   - Tests import the module-level instance and override get_db

2. Lifespan Events
   - startup: create missing tables when AUTO_CREATE_TABLES is on
   - shutdown: dispose of the connection pool

3. Exception Handlers
   - Request validation errors become a 400 envelope listing each field
   - Storage and unexpected errors become a 500 envelope; details are
     logged, never returned
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.exc import SQLAlchemyError

from library_api.config import get_settings
from library_api.database import create_tables, engine
from library_api.routers import authors_router, books_router, genres_router
from library_api.schemas import ApiResponse
from library_api.services.rate_limiter import limiter, rate_limit_exceeded_handler

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def envelope_response(status_code: int, message: str, errors: list[str] | None = None) -> JSONResponse:
    """Build a JSONResponse carrying a failed ApiResponse envelope."""
    body = ApiResponse(success=False, message=message, errors=errors)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
    )


def format_validation_errors(exc: RequestValidationError) -> list[str]:
    """
    Flatten pydantic errors into "field: message" strings.

    The leading location part ("body", "query", "path") is dropped:
        ("body", "name") -> "name: String should have at least 1 character"
    """
    messages = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ())]
        if location and location[0] in ("body", "query", "path", "header"):
            location = location[1:]
        field = ".".join(location) or "request"
        messages.append(f"{field}: {error.get('msg', 'Invalid value')}")
    return messages


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    # ----- STARTUP -----
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"API version: {settings.api_version}")

    if settings.auto_create_tables:
        try:
            create_tables()
            logger.info("Database tables ready")
        except SQLAlchemyError as exc:
            logger.error(f"Could not create database tables: {exc}")

    yield

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {settings.app_name}...")
    engine.dispose()


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Library API

A RESTful API for managing a library catalog.

### Resources
- **Genres**: unique names, cannot be deleted while they have books
- **Authors**: unique first/last name pairs, cannot be deleted while they have books
- **Books**: must reference an existing author and genre; ISBN is unique when given

### Responses
Every endpoint answers with an envelope: `success`, `message`, `data`
and `errors`. List endpoints add `totalCount`, `pageNumber`, `pageSize`,
`totalPages`, `hasPreviousPage` and `hasNextPage`.
        """,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # Rate Limiting
    # -------------------------------------------------------------------------
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Reject malformed input with a 400 envelope listing each problem."""
        errors = format_validation_errors(exc)
        logger.info(f"Invalid request to {request.url.path}: {errors}")
        return envelope_response(status.HTTP_400_BAD_REQUEST, "Invalid data", errors)

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Handle database errors that escaped the services.

        Logs the actual error while hiding details from clients.
        """
        logger.error(f"Database error: {exc}", exc_info=True)
        return envelope_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "A database error occurred. Please try again later.",
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In debug mode the exception text is included in errors.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)
        errors = [str(exc)] if settings.debug else None
        return envelope_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An internal error occurred.",
            errors,
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    # prefix="/api/v1" creates versioned URLs: /api/v1/books, /api/v1/authors
    api_prefix = f"/api/{settings.api_version}"

    app.include_router(genres_router, prefix=api_prefix)
    app.include_router(authors_router, prefix=api_prefix)
    app.include_router(books_router, prefix=api_prefix)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and healthy.",
    )
    async def health_check() -> dict:
        """Used by load balancers and container probes."""
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": settings.api_version,
            "environment": settings.environment,
            "rate_limiting": {
                "enabled": settings.rate_limit_enabled,
                "default_limit": settings.rate_limit_default,
                "write_limit": settings.rate_limit_write,
            },
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.api_version,
            "docs": "/docs",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn library_api.main:app
app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# python -m library_api.main
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "library_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
