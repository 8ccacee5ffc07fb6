"""
Statement helpers shared by the catalog repository adapters.
"""

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator

from sqlalchemy import Table, insert, update
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from app.domain.catalog.errors import RecordNotFoundError, RepositoryError

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@contextmanager
def translate_errors(operation: str) -> Iterator[None]:
    """Re-raise database failures as RepositoryError."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("Database error during %s: %s", operation, type(exc).__name__)
        raise RepositoryError(operation, type(exc).__name__) from exc


def upsert(conn: Connection, table: Table, record_id: str, values: dict[str, Any]) -> None:
    """Update the row with this id (reviving it if deleted), or insert it."""
    now = utc_now()
    result = conn.execute(
        update(table)
        .where(table.c.id == record_id)
        .values(**values, updated_at=now, deleted_at=None)
    )
    if result.rowcount == 0:
        conn.execute(
            insert(table).values(id=record_id, **values, created_at=now, updated_at=now)
        )


def soft_delete(conn: Connection, table: Table, record_id: str, entity: str) -> None:
    """Mark a live row as deleted.

    Raises:
        RecordNotFoundError: If no live row has this id.
    """
    result = conn.execute(
        update(table)
        .where(table.c.id == record_id, table.c.deleted_at.is_(None))
        .values(deleted_at=utc_now())
    )
    if result.rowcount == 0:
        raise RecordNotFoundError(entity, record_id)
