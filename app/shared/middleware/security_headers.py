"""
Secure HTTP headers middleware.

Adds restrictive defaults to every response. The API only ever serves
JSON, so framing and content sniffing are disabled outright. HSTS is
only sent outside development, where TLS terminates in front of us.
"""

from typing import Mapping

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

API_SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "Cache-Control": "no-store",
}

HSTS_HEADER = ("Strict-Transport-Security", "max-age=31536000; includeSubDomains")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that sets secure headers the handler did not set itself.

    Args:
        app: The wrapped ASGI application.
        headers: Headers to add. Defaults to API_SECURE_HEADERS.
        enable_hsts: Also send Strict-Transport-Security.
    """

    def __init__(
        self,
        app: ASGIApp,
        headers: Mapping[str, str] | None = None,
        enable_hsts: bool = False,
    ) -> None:
        super().__init__(app)
        self._headers = dict(API_SECURE_HEADERS if headers is None else headers)
        if enable_hsts:
            self._headers[HSTS_HEADER[0]] = HSTS_HEADER[1]

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process request and add security headers to response."""
        response = await call_next(request)
        for header_name, header_value in self._headers.items():
            response.headers.setdefault(header_name, header_value)
        return response
