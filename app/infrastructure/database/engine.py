"""
Database engine setup.

One pooled SQLAlchemy engine per process, built from application
settings. SQLAlchemy Core (not ORM) is used: repositories issue
explicit statements and map rows to domain entities themselves.
"""

import logging
from functools import lru_cache

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.infrastructure.database.schema import metadata

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Return the process-wide engine, creating it on first use."""
    dsn = settings.get_database_dsn()
    logger.info("Creating database engine for %s", dsn.split("://", 1)[0])
    return create_engine(dsn, pool_pre_ping=True)


def init_schema(engine: Engine) -> None:
    """Create any missing tables. Idempotent."""
    metadata.create_all(engine)


def ping(engine: Engine) -> bool:
    """Return True if the database answers a trivial query."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.warning("Database ping failed", exc_info=True)
        return False
    return True
