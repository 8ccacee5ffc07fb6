"""
Health check router.

Provides liveness and database readiness endpoints for probes.
No business logic. Returns application status and version.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from app.core.config import settings
from app.infrastructure.database.engine import get_engine, ping
from app.interfaces.catalog.schemas import (
    DatabaseHealthResponse,
    ErrorResponse,
    HealthResponse,
)

router = APIRouter(tags=["health"])

HTTP_500 = 500


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=settings.version)


@router.get(
    "/db-health",
    response_model=DatabaseHealthResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Database health check",
)
def database_health(engine: Engine = Depends(get_engine)):
    """Report whether the database answers."""
    if not ping(engine):
        return JSONResponse(
            status_code=HTTP_500,
            content={"error": "Database connection failed"},
        )
    return DatabaseHealthResponse(message="Database connection is healthy")
