"""
Use cases: Save, list, read and delete users.

Input: SaveUserCommand, ListUsersQuery, user ids.
Output: User entities / saved ids.
Side effects: Writes to the user repository.
Failure cases: MissingIdentifierError, RecordNotFoundError, RepositoryError.
"""

import logging

from app.application.catalog._ids import resolve_id
from app.application.catalog.dtos import ListUsersQuery, SaveUserCommand
from app.domain.catalog.entities import User
from app.domain.catalog.ports import UserRepository

logger = logging.getLogger(__name__)


class ManageUsersUseCase:
    """Orchestrates user CRUD over the UserRepository port."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def save(self, command: SaveUserCommand) -> str:
        """Create or update a user and return its id."""
        user_id = resolve_id("User", command.id, command.is_update)
        self._user_repo.save(
            User(
                id=user_id,
                name=command.name,
                email=command.email,
                user_type=command.user_type,
            )
        )
        return user_id

    def list(self, query: ListUsersQuery) -> list[User]:
        """Return users, paged when both page and limit are given."""
        if query.page > 0 and query.limit > 0:
            return self._user_repo.list(
                limit=query.limit, offset=(query.page - 1) * query.limit
            )
        return self._user_repo.list()

    def detail(self, user_id: str) -> User:
        return self._user_repo.detail(user_id)

    def delete(self, user_id: str) -> None:
        logger.info("Deleting user id=%s", user_id)
        self._user_repo.delete(user_id)
