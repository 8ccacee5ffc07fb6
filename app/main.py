"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health and the catalog context)
- Error handlers (centralized binding/domain-to-HTTP mapping)
- Middleware (request id, request logging, timeout, security headers,
  CORS, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.infrastructure.database.engine import get_engine, init_schema
from app.interfaces.catalog.router import router as catalog_router
from app.interfaces.health import router as health_router
from app.shared.binding.fields import registered_schemas
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.middleware.rate_limiting import limiter, rate_limit_exceeded_handler
from app.shared.middleware.request_id import RequestIdMiddleware
from app.shared.middleware.request_logging import RequestLoggingMiddleware
from app.shared.middleware.security_headers import SecurityHeadersMiddleware
from app.shared.middleware.timeout import TimeoutMiddleware

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: create missing tables when enabled."""
    if settings.auto_create_schema:
        # Honor a test override of the engine dependency.
        engine_factory = app.dependency_overrides.get(get_engine, get_engine)
        try:
            init_schema(engine_factory())
        except SQLAlchemyError:
            logger.warning(
                "Database schema could not be created at startup. "
                "Requests needing the database will fail until it is reachable.",
                exc_info=True,
            )
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Middleware (last added runs first) ---
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware, enable_hsts=settings.env == "prod")
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIdMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(catalog_router, prefix=API_PREFIX)

    # --- Request records (built when the routers were imported) ---
    app.state.record_schemas = registered_schemas()
    logger.info("Registered %d request record descriptions", len(app.state.record_schemas))

    return app


app = create_app()
