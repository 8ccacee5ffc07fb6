"""
Request logging middleware.

Logs the start and end of every request with its path, status and
elapsed time. Query strings are logged; bodies never are.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("app.requests")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs one line when a request starts and one when it ends."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Time the request and log its outcome."""
        logger.info("Request started: %s %s", request.method, request.url.path)
        start = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Request finished: %s %s status=%d query=%r client=%s elapsed_ms=%.1f",
            request.method,
            request.url.path,
            response.status_code,
            request.url.query,
            request.client.host if request.client else "-",
            elapsed_ms,
        )
        return response
