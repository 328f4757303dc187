"""
Rate Limiting Service

Protects the API from abuse using slowapi.

Rate Limit Tiers:
=================
- Reads (GET/HEAD): settings.rate_limit_default, 100 requests/minute
- Writes (POST/PUT/DELETE): settings.rate_limit_write, 30 requests/minute

Counters live in settings.rate_limit_storage_uri ("memory://" by
default; point it at a shared backend when running several instances).
Set RATE_LIMIT_ENABLED=false to turn limiting off, as the tests do.
"""

import logging

from fastapi import Request
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from library_api.config import get_settings
from library_api.schemas.common import ApiResponse

logger = logging.getLogger(__name__)
settings = get_settings()


def get_client_ip(request: Request) -> str:
    """
    Get client IP address for rate limiting.

    Honors X-Forwarded-For and X-Real-IP when the API runs behind a
    proxy, and falls back to the direct connection address.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        # First entry is the original client
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return get_remote_address(request)


def create_limiter() -> Limiter:
    """Create the limiter from settings."""
    limiter = Limiter(
        key_func=get_client_ip,
        default_limits=[settings.rate_limit_default],
        storage_uri=settings.rate_limit_storage_uri,
        strategy="fixed-window",
        enabled=settings.rate_limit_enabled,
    )

    logger.info(
        f"Rate limiter initialized - enabled: {settings.rate_limit_enabled}, "
        f"default: {settings.rate_limit_default}, write: {settings.rate_limit_write}"
    )

    return limiter


limiter = create_limiter()


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """
    Handler for rate limit exceeded errors.

    Returns the standard failure envelope with a 429 status and a
    Retry-After header.
    """
    limit_detail = str(exc.detail)

    body = ApiResponse(
        success=False,
        message="Too many requests. Please slow down.",
        errors=[limit_detail],
    )
    response = JSONResponse(
        status_code=429,
        content=body.model_dump(mode="json", by_alias=True),
    )
    response.headers["Retry-After"] = str(60)
    response.headers["X-RateLimit-Limit"] = limit_detail

    logger.warning(f"Rate limit exceeded for {get_client_ip(request)}: {limit_detail}")

    return response
