"""
Adapter: Summary repository.

Implements SummaryRepository port.
Persists summaries and reads them back joined with their author,
category and subcategory. Listing fetches one row past the page to
tell whether another page follows.
"""

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from app.domain.catalog.entities import (
    DEFAULT_PAGE_LIMIT,
    Category,
    Subcategory,
    Summary,
    SummaryListOptions,
    SummaryPage,
    User,
)
from app.domain.catalog.errors import RecordNotFoundError
from app.domain.catalog.ports import SummaryRepository
from app.infrastructure.catalog._sql import soft_delete, translate_errors, upsert
from app.infrastructure.database.schema import categories, subcategories, summaries, users

logger = logging.getLogger(__name__)


def _labelled(table, prefix: str, names: tuple[str, ...]) -> list:
    return [table.c[name].label(f"{prefix}__{name}") for name in names]


def _joined_select():
    return select(
        summaries,
        *_labelled(users, "user", ("id", "name", "email", "user_type", "created_at", "updated_at")),
        *_labelled(categories, "category", ("id", "name", "created_at", "updated_at")),
        *_labelled(
            subcategories,
            "subcategory",
            ("id", "category_id", "name", "created_at", "updated_at"),
        ),
    ).select_from(
        summaries.outerjoin(
            users, (summaries.c.user_id == users.c.id) & users.c.deleted_at.is_(None)
        )
        .outerjoin(
            categories,
            (summaries.c.category_id == categories.c.id)
            & categories.c.deleted_at.is_(None),
        )
        .outerjoin(
            subcategories,
            (summaries.c.subcategory_id == subcategories.c.id)
            & subcategories.c.deleted_at.is_(None),
        )
    )


def _filters(options: SummaryListOptions) -> list:
    conditions = [summaries.c.deleted_at.is_(None)]
    if options.category_id:
        conditions.append(summaries.c.category_id == options.category_id)
    if options.subcategory_id:
        conditions.append(summaries.c.subcategory_id == options.subcategory_id)
    return conditions


def row_to_summary(row: Any) -> Summary:
    user = None
    if row["user__id"] is not None:
        user = User(
            id=row["user__id"],
            name=row["user__name"],
            email=row["user__email"],
            user_type=row["user__user_type"],
            created_at=row["user__created_at"],
            updated_at=row["user__updated_at"],
        )

    category = None
    if row["category__id"] is not None:
        category = Category(
            id=row["category__id"],
            name=row["category__name"],
            created_at=row["category__created_at"],
            updated_at=row["category__updated_at"],
        )

    subcategory = None
    if row["subcategory__id"] is not None:
        subcategory = Subcategory(
            id=row["subcategory__id"],
            category_id=row["subcategory__category_id"],
            name=row["subcategory__name"],
            created_at=row["subcategory__created_at"],
            updated_at=row["subcategory__updated_at"],
        )

    return Summary(
        id=row["id"],
        title=row["title"],
        description=row["description"] or "",
        content=row["content"],
        user_id=row["user_id"],
        category_id=row["category_id"],
        subcategory_id=row["subcategory_id"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        user=user,
        category=category,
        subcategory=subcategory,
    )


class SummaryRepositoryAdapter(SummaryRepository):
    """SQLAlchemy implementation of the summary repository."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def save(self, summary: Summary) -> None:
        """Insert or update a summary."""
        values = {
            "title": summary.title,
            "description": summary.description,
            "content": summary.content,
            "category_id": summary.category_id,
            "subcategory_id": summary.subcategory_id,
            "user_id": summary.user_id,
        }
        with translate_errors("save summary"), self._engine.begin() as conn:
            upsert(conn, summaries, summary.id, values)
        logger.info("Saved summary id=%s", summary.id)

    def list(self, options: SummaryListOptions) -> SummaryPage:
        """Return one page of live summaries, newest first.

        A non-positive limit falls back to the default page size and a
        negative offset to zero.

        Args:
            options: Filters and paging.

        Returns:
            The page, with the filtered total and a has_next flag.
        """
        limit = options.limit if options.limit > 0 else DEFAULT_PAGE_LIMIT
        offset = max(options.offset, 0)
        conditions = _filters(options)

        count_stmt = select(func.count()).select_from(summaries).where(*conditions)
        page_stmt = (
            _joined_select()
            .where(*conditions)
            .order_by(summaries.c.created_at.desc(), summaries.c.id)
            .limit(limit + 1)
            .offset(offset)
        )

        with translate_errors("list summaries"), self._engine.connect() as conn:
            total = int(conn.execute(count_stmt).scalar_one())
            rows = conn.execute(page_stmt).mappings().all()

        items = [row_to_summary(row) for row in rows]
        has_next = len(items) > limit
        return SummaryPage(
            items=items[:limit],
            total=total,
            limit=limit,
            offset=offset,
            has_next=has_next,
        )

    def detail(self, summary_id: str) -> Summary:
        """Return a live summary by id."""
        stmt = _joined_select().where(
            summaries.c.id == summary_id, summaries.c.deleted_at.is_(None)
        )
        with translate_errors("get summary detail"), self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            raise RecordNotFoundError("Summary", summary_id)
        return row_to_summary(row)

    def delete(self, summary_id: str) -> None:
        """Soft-delete a summary."""
        with translate_errors("delete summary"), self._engine.begin() as conn:
            soft_delete(conn, summaries, summary_id, "Summary")
        logger.info("Deleted summary id=%s", summary_id)
