"""
Adapter: Category repository.

Implements CategoryRepository port.
Persists categories in the categories table.
"""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.engine import Engine

from app.domain.catalog.entities import Category
from app.domain.catalog.errors import RecordNotFoundError
from app.domain.catalog.ports import CategoryRepository
from app.infrastructure.catalog._sql import soft_delete, translate_errors, upsert
from app.infrastructure.database.schema import categories

logger = logging.getLogger(__name__)


def row_to_category(row: Any) -> Category:
    return Category(
        id=row["id"],
        name=row["name"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class CategoryRepositoryAdapter(CategoryRepository):
    """SQLAlchemy implementation of the category repository."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def save(self, category: Category) -> None:
        """Insert or update a category."""
        with translate_errors("save category"), self._engine.begin() as conn:
            upsert(conn, categories, category.id, {"name": category.name})
        logger.info("Saved category id=%s", category.id)

    def list(self) -> list[Category]:
        """Return live categories ordered by name."""
        stmt = (
            select(categories)
            .where(categories.c.deleted_at.is_(None))
            .order_by(categories.c.name, categories.c.id)
        )
        with translate_errors("list categories"), self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [row_to_category(row) for row in rows]

    def detail(self, category_id: str) -> Category:
        """Return a live category by id."""
        stmt = select(categories).where(
            categories.c.id == category_id, categories.c.deleted_at.is_(None)
        )
        with translate_errors("get category detail"), self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            raise RecordNotFoundError("Category", category_id)
        return row_to_category(row)

    def delete(self, category_id: str) -> None:
        """Soft-delete a category."""
        with translate_errors("delete category"), self._engine.begin() as conn:
            soft_delete(conn, categories, category_id, "Category")
        logger.info("Deleted category id=%s", category_id)
