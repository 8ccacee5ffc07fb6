"""
Centralized error handlers for FastAPI.

Maps binding and domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
Binding errors answer with the offending field and message; all other
errors use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.catalog.errors import (
    CatalogDomainError,
    MissingIdentifierError,
    RecordNotFoundError,
    RepositoryError,
)
from app.shared.binding import BindError, BindErrorKind, ValidationError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def _binding_response(field: str, message: str) -> JSONResponse:
    """Build the 400 response for a request that failed binding or validation."""
    return JSONResponse(
        status_code=HTTP_400, content={"field": field, "message": message}
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all binding and domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(BindError)
    async def handle_bind_error(_request: Request, exc: BindError) -> JSONResponse:
        """Handle request data that could not be bound."""
        if exc.kind is BindErrorKind.UNSUPPORTED:
            # A record description bug, not a client error.
            logger.error("Unsupported field kind reached a request: %s", exc.message)
            return _error_response(HTTP_500, "Internal server error")
        logger.warning("Bind error (%s): %s", exc.kind.value, exc.message)
        return _binding_response(exc.field, exc.message)

    @app.exception_handler(ValidationError)
    async def handle_validation_error(
        _request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle a bound record that violates a rule."""
        logger.info("Validation failed on %s (%s)", exc.field, exc.rule)
        return _binding_response(exc.field, exc.message)

    @app.exception_handler(MissingIdentifierError)
    async def handle_missing_identifier(
        _request: Request, exc: MissingIdentifierError
    ) -> JSONResponse:
        """Handle an update request without an id."""
        return _binding_response("ID", exc.message)

    @app.exception_handler(RecordNotFoundError)
    async def handle_not_found(
        _request: Request, exc: RecordNotFoundError
    ) -> JSONResponse:
        """Handle missing records."""
        logger.warning("%s not found: %s", exc.entity, exc.record_id)
        return _error_response(HTTP_404, f"{exc.entity} not found")

    @app.exception_handler(RepositoryError)
    async def handle_repository_error(
        _request: Request, exc: RepositoryError
    ) -> JSONResponse:
        """Handle data store failures."""
        logger.error("Repository error: %s", exc.message)
        return _error_response(HTTP_500, f"Failed to {exc.operation}")

    @app.exception_handler(CatalogDomainError)
    async def handle_catalog_domain(
        _request: Request, exc: CatalogDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled catalog domain errors."""
        logger.error("Unhandled catalog domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
