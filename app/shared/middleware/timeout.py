"""
Request timeout middleware.

Races the whole handler against a deadline and answers 408 when the
deadline wins.
"""

import asyncio
import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

HTTP_408 = 408


class TimeoutMiddleware(BaseHTTPMiddleware):
    """Middleware that bounds the time spent serving a request.

    Args:
        app: The wrapped ASGI application.
        timeout_seconds: Deadline for each request.
    """

    def __init__(self, app: ASGIApp, timeout_seconds: float = 5.0) -> None:
        super().__init__(app)
        self.timeout_seconds = timeout_seconds

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Run the request, giving up after the configured deadline."""
        try:
            return await asyncio.wait_for(call_next(request), self.timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning(
                "Request timed out after %.1fs: %s %s",
                self.timeout_seconds,
                request.method,
                request.url.path,
            )
            return PlainTextResponse("Timeout", status_code=HTTP_408)
