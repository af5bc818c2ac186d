"""Rate limiting per client address"""
import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from postboard.config import Settings

logger = logging.getLogger("uvicorn.error")


def build_limiter(settings: Settings) -> Limiter:
    """
    Limiter applying `settings.rate_limit` to every route, keyed by client IP.
    Counters live in process memory.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit],
        enabled=settings.rate_limit_enabled,
        storage_uri="memory://",
        strategy="fixed-window",
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    # Must stay sync: SlowAPIMiddleware does not await the handler
    logger.warning(
        "[rate-limit] %s %s from %s: %s",
        request.method,
        request.url.path,
        get_remote_address(request),
        exc.detail,
    )
    return JSONResponse(
        status_code=429,
        content={"detail": {"code": "RATE_LIMITED", "message": f"Too many requests: {exc.detail}"}},
    )
