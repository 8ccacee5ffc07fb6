"""
Dependency injection for the catalog bounded context.

Provides FastAPI dependency functions that wire repository adapters
into use cases via constructor injection. The engine is itself a
dependency so tests can swap in their own database.
"""

from fastapi import Depends
from sqlalchemy.engine import Engine

from app.application.catalog.manage_categories import (
    ManageCategoriesUseCase,
    ManageSubcategoriesUseCase,
)
from app.application.catalog.manage_summaries import ManageSummariesUseCase
from app.application.catalog.manage_users import ManageUsersUseCase
from app.infrastructure.catalog.category_repository import CategoryRepositoryAdapter
from app.infrastructure.catalog.subcategory_repository import (
    SubcategoryRepositoryAdapter,
)
from app.infrastructure.catalog.summary_repository import SummaryRepositoryAdapter
from app.infrastructure.catalog.user_repository import UserRepositoryAdapter
from app.infrastructure.database.engine import get_engine


def get_users_use_case(engine: Engine = Depends(get_engine)) -> ManageUsersUseCase:
    """Build ManageUsersUseCase with its repository."""
    return ManageUsersUseCase(user_repo=UserRepositoryAdapter(engine=engine))


def get_categories_use_case(
    engine: Engine = Depends(get_engine),
) -> ManageCategoriesUseCase:
    """Build ManageCategoriesUseCase with its repository."""
    return ManageCategoriesUseCase(
        category_repo=CategoryRepositoryAdapter(engine=engine)
    )


def get_subcategories_use_case(
    engine: Engine = Depends(get_engine),
) -> ManageSubcategoriesUseCase:
    """Build ManageSubcategoriesUseCase with its repository."""
    return ManageSubcategoriesUseCase(
        subcategory_repo=SubcategoryRepositoryAdapter(engine=engine)
    )


def get_summaries_use_case(
    engine: Engine = Depends(get_engine),
) -> ManageSummariesUseCase:
    """Build ManageSummariesUseCase with its repository."""
    return ManageSummariesUseCase(summary_repo=SummaryRepositoryAdapter(engine=engine))
