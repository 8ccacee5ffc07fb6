"""
Adapter: Subcategory repository.

Implements SubcategoryRepository port.
Persists subcategories and reads them back joined with their category.
"""

import logging
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.engine import Engine

from app.domain.catalog.entities import Category, Subcategory
from app.domain.catalog.errors import RecordNotFoundError
from app.domain.catalog.ports import SubcategoryRepository
from app.infrastructure.catalog._sql import soft_delete, translate_errors, upsert
from app.infrastructure.database.schema import categories, subcategories

logger = logging.getLogger(__name__)


def _joined_select():
    return select(
        subcategories,
        categories.c.id.label("category__id"),
        categories.c.name.label("category__name"),
        categories.c.created_at.label("category__created_at"),
        categories.c.updated_at.label("category__updated_at"),
    ).select_from(
        subcategories.outerjoin(
            categories,
            (subcategories.c.category_id == categories.c.id)
            & categories.c.deleted_at.is_(None),
        )
    )


def row_to_subcategory(row: Any) -> Subcategory:
    category = None
    if row["category__id"] is not None:
        category = Category(
            id=row["category__id"],
            name=row["category__name"],
            created_at=row["category__created_at"],
            updated_at=row["category__updated_at"],
        )
    return Subcategory(
        id=row["id"],
        category_id=row["category_id"],
        name=row["name"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        category=category,
    )


class SubcategoryRepositoryAdapter(SubcategoryRepository):
    """SQLAlchemy implementation of the subcategory repository."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def save(self, subcategory: Subcategory) -> None:
        """Insert or update a subcategory."""
        with translate_errors("save subcategory"), self._engine.begin() as conn:
            upsert(
                conn,
                subcategories,
                subcategory.id,
                {"category_id": subcategory.category_id, "name": subcategory.name},
            )
        logger.info("Saved subcategory id=%s", subcategory.id)

    def list(self, category_id: Optional[str] = None) -> list[Subcategory]:
        """Return live subcategories ordered by name.

        Args:
            category_id: Only return subcategories of this category.
        """
        stmt = _joined_select().where(subcategories.c.deleted_at.is_(None))
        if category_id:
            stmt = stmt.where(subcategories.c.category_id == category_id)
        stmt = stmt.order_by(subcategories.c.name, subcategories.c.id)

        with translate_errors("list subcategories"), self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [row_to_subcategory(row) for row in rows]

    def detail(self, subcategory_id: str) -> Subcategory:
        """Return a live subcategory by id."""
        stmt = _joined_select().where(
            subcategories.c.id == subcategory_id,
            subcategories.c.deleted_at.is_(None),
        )
        with translate_errors("get subcategory detail"), self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            raise RecordNotFoundError("Subcategory", subcategory_id)
        return row_to_subcategory(row)

    def delete(self, subcategory_id: str) -> None:
        """Soft-delete a subcategory."""
        with translate_errors("delete subcategory"), self._engine.begin() as conn:
            soft_delete(conn, subcategories, subcategory_id, "Subcategory")
        logger.info("Deleted subcategory id=%s", subcategory_id)
