"""
Port interfaces (ABCs) for the catalog bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.

Every repository raises RecordNotFoundError from ``detail``/``delete``
for unknown or deleted ids, and RepositoryError when the data store fails.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.catalog.entities import (
    Category,
    Subcategory,
    Summary,
    SummaryListOptions,
    SummaryPage,
    User,
)


class UserRepository(ABC):
    """Port for persisting and retrieving users."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Insert the user, or update it if the id already exists."""
        raise NotImplementedError

    @abstractmethod
    def list(self, limit: Optional[int] = None, offset: int = 0) -> list[User]:
        """Return users, newest first."""
        raise NotImplementedError

    @abstractmethod
    def detail(self, user_id: str) -> User:
        """Return a user by id."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, user_id: str) -> None:
        """Soft-delete a user."""
        raise NotImplementedError


class CategoryRepository(ABC):
    """Port for persisting and retrieving categories."""

    @abstractmethod
    def save(self, category: Category) -> None:
        """Insert the category, or update it if the id already exists."""
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[Category]:
        """Return all categories ordered by name."""
        raise NotImplementedError

    @abstractmethod
    def detail(self, category_id: str) -> Category:
        """Return a category by id."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, category_id: str) -> None:
        """Soft-delete a category."""
        raise NotImplementedError


class SubcategoryRepository(ABC):
    """Port for persisting and retrieving subcategories."""

    @abstractmethod
    def save(self, subcategory: Subcategory) -> None:
        """Insert the subcategory, or update it if the id already exists."""
        raise NotImplementedError

    @abstractmethod
    def list(self, category_id: Optional[str] = None) -> list[Subcategory]:
        """Return subcategories, optionally only those of one category."""
        raise NotImplementedError

    @abstractmethod
    def detail(self, subcategory_id: str) -> Subcategory:
        """Return a subcategory by id, with its category attached."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, subcategory_id: str) -> None:
        """Soft-delete a subcategory."""
        raise NotImplementedError


class SummaryRepository(ABC):
    """Port for persisting and retrieving summaries."""

    @abstractmethod
    def save(self, summary: Summary) -> None:
        """Insert the summary, or update it if the id already exists."""
        raise NotImplementedError

    @abstractmethod
    def list(self, options: SummaryListOptions) -> SummaryPage:
        """Return one page of summaries matching the options."""
        raise NotImplementedError

    @abstractmethod
    def detail(self, summary_id: str) -> Summary:
        """Return a summary by id, with user/category/subcategory attached."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, summary_id: str) -> None:
        """Soft-delete a summary."""
        raise NotImplementedError
