"""
Rate Limiting Service

Per-client request limits for the books endpoints, built on slowapi.

Reads (list, get) share RATE_LIMIT_DEFAULT; create, update, delete and
CSV import share the stricter RATE_LIMIT_WRITE. Counters live in process
memory next to the book store, so every worker keeps its own counts.

Clients over a limit get a 429 in the same shape as every other error
response from this API:

    {"detail": "Rate limit exceeded: 30 per 1 minute"}

with a Retry-After header set to the length of the limit's window.
"""

import logging

from fastapi import Request
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from library_api.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


def get_client_ip(request: Request) -> str:
    """
    Key requests by the originating client address.

    The first X-Forwarded-For entry wins, then X-Real-IP, then the
    socket peer address.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return get_remote_address(request)


limiter = Limiter(
    key_func=get_client_ip,
    default_limits=[settings.rate_limit_default],
    storage_uri="memory://",
    enabled=settings.rate_limit_enabled,
)

logger.info(
    f"Book rate limits - enabled: {settings.rate_limit_enabled}, "
    f"reads: {settings.rate_limit_default}, writes: {settings.rate_limit_write}"
)


def retry_after_seconds(exc: RateLimitExceeded) -> int:
    """Length in seconds of the window of the limit that was hit."""
    return exc.limit.limit.get_expiry()


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Respond to a client that went over a book endpoint's limit."""
    logger.warning(
        f"{request.method} {request.url.path} throttled for "
        f"{get_client_ip(request)}: {exc.detail}"
    )
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded: {exc.detail}"},
        headers={"Retry-After": str(retry_after_seconds(exc))},
    )
