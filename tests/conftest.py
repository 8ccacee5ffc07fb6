"""Pytest configuration: an in-memory SQLite database behind the API."""

import os

# Must be set before the application settings are loaded.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.infrastructure.database.engine import get_engine, init_schema  # noqa: E402
from app.main import app  # noqa: E402


@pytest.fixture
def engine():
    """A fresh in-memory database with the catalog tables."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def client(engine):
    """A TestClient whose routes use the in-memory database."""
    app.dependency_overrides[get_engine] = lambda: engine
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
