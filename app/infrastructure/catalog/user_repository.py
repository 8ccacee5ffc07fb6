"""
Adapter: User repository.

Implements UserRepository port.
Persists users in the users table.
"""

import logging
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.engine import Engine

from app.domain.catalog.entities import User
from app.domain.catalog.errors import RecordNotFoundError
from app.domain.catalog.ports import UserRepository
from app.infrastructure.catalog._sql import soft_delete, translate_errors, upsert
from app.infrastructure.database.schema import users

logger = logging.getLogger(__name__)


def row_to_user(row: Any) -> User:
    return User(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        user_type=row["user_type"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class UserRepositoryAdapter(UserRepository):
    """SQLAlchemy implementation of the user repository."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def save(self, user: User) -> None:
        """Insert or update a user."""
        with translate_errors("save user"), self._engine.begin() as conn:
            upsert(
                conn,
                users,
                user.id,
                {"name": user.name, "email": user.email, "user_type": user.user_type},
            )
        logger.info("Saved user id=%s", user.id)

    def list(self, limit: Optional[int] = None, offset: int = 0) -> list[User]:
        """Return live users, newest first.

        Args:
            limit: Maximum number of users; all of them when None.
            offset: Number of users to skip.
        """
        stmt = (
            select(users)
            .where(users.c.deleted_at.is_(None))
            .order_by(users.c.created_at.desc(), users.c.id)
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)

        with translate_errors("list users"), self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [row_to_user(row) for row in rows]

    def detail(self, user_id: str) -> User:
        """Return a live user by id."""
        stmt = select(users).where(users.c.id == user_id, users.c.deleted_at.is_(None))
        with translate_errors("get user detail"), self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            raise RecordNotFoundError("User", user_id)
        return row_to_user(row)

    def delete(self, user_id: str) -> None:
        """Soft-delete a user."""
        with translate_errors("delete user"), self._engine.begin() as conn:
            soft_delete(conn, users, user_id, "User")
        logger.info("Deleted user id=%s", user_id)
