"""
HTTP Middleware

RequestLoggingMiddleware tags each request with an id and writes one log
line per request:

    GET /api/v1/books 200 1.42ms [request_id=...]

The id is taken from an incoming X-Request-Id header when present and is
echoed back on the response.
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("library_api.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        req_id = request.headers.get("X-Request-Id") or str(uuid.uuid4())
        request.state.request_id = req_id

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        response.headers["X-Request-Id"] = req_id
        logger.info(
            f"{request.method} {request.url.path} {response.status_code} "
            f"{elapsed_ms:.2f}ms [request_id={req_id}]"
        )
        return response
