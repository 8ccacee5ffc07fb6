"""
Use cases: Save, list, read and delete categories and subcategories.

Input: SaveCategoryCommand, SaveSubcategoryCommand, ids.
Output: Category / Subcategory entities, saved ids.
Side effects: Writes to the category and subcategory repositories.
Failure cases: MissingIdentifierError, RecordNotFoundError, RepositoryError.
"""

import logging
from typing import Optional

from app.application.catalog._ids import resolve_id
from app.application.catalog.dtos import SaveCategoryCommand, SaveSubcategoryCommand
from app.domain.catalog.entities import Category, Subcategory
from app.domain.catalog.ports import CategoryRepository, SubcategoryRepository

logger = logging.getLogger(__name__)


class ManageCategoriesUseCase:
    """Orchestrates category CRUD over the CategoryRepository port."""

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def save(self, command: SaveCategoryCommand) -> str:
        """Create or update a category and return its id."""
        category_id = resolve_id("Category", command.id, command.is_update)
        self._category_repo.save(Category(id=category_id, name=command.name))
        return category_id

    def list(self) -> list[Category]:
        return self._category_repo.list()

    def detail(self, category_id: str) -> Category:
        return self._category_repo.detail(category_id)

    def delete(self, category_id: str) -> None:
        logger.info("Deleting category id=%s", category_id)
        self._category_repo.delete(category_id)


class ManageSubcategoriesUseCase:
    """Orchestrates subcategory CRUD over the SubcategoryRepository port."""

    def __init__(self, subcategory_repo: SubcategoryRepository) -> None:
        self._subcategory_repo = subcategory_repo

    def save(self, command: SaveSubcategoryCommand) -> str:
        """Create or update a subcategory and return its id."""
        subcategory_id = resolve_id("Subcategory", command.id, command.is_update)
        self._subcategory_repo.save(
            Subcategory(
                id=subcategory_id,
                category_id=command.category_id,
                name=command.name,
            )
        )
        return subcategory_id

    def list(self, category_id: Optional[str] = None) -> list[Subcategory]:
        return self._subcategory_repo.list(category_id=category_id)

    def detail(self, subcategory_id: str) -> Subcategory:
        return self._subcategory_repo.detail(subcategory_id)

    def delete(self, subcategory_id: str) -> None:
        logger.info("Deleting subcategory id=%s", subcategory_id)
        self._subcategory_repo.delete(subcategory_id)
