"""
Tests for the catalog application layer (use cases).

Tests use cases with mocked ports. No real infrastructure needed.
Each test verifies orchestration logic, not persistence.
"""

from unittest.mock import MagicMock

import pytest

from app.application.catalog.dtos import (
    ListSummariesQuery,
    ListUsersQuery,
    SaveCategoryCommand,
    SaveSubcategoryCommand,
    SaveSummaryCommand,
    SaveUserCommand,
)
from app.application.catalog.manage_categories import (
    ManageCategoriesUseCase,
    ManageSubcategoriesUseCase,
)
from app.application.catalog.manage_summaries import ManageSummariesUseCase
from app.application.catalog.manage_users import ManageUsersUseCase
from app.domain.catalog.entities import SummaryListOptions, SummaryPage
from app.domain.catalog.errors import MissingIdentifierError
from app.domain.catalog.ports import (
    CategoryRepository,
    SubcategoryRepository,
    SummaryRepository,
    UserRepository,
)


class TestManageUsersUseCase:
    """Tests for the ManageUsersUseCase."""

    def test_create_generates_id(self) -> None:
        repo = MagicMock(spec=UserRepository)
        use_case = ManageUsersUseCase(user_repo=repo)

        user_id = use_case.save(SaveUserCommand(name="Ana", email="a@x.io", user_type="admin"))

        assert len(user_id) == 32
        saved = repo.save.call_args.args[0]
        assert (saved.id, saved.name, saved.user_type) == (user_id, "Ana", "admin")

    def test_update_keeps_given_id(self) -> None:
        repo = MagicMock(spec=UserRepository)
        user_id = ManageUsersUseCase(repo).save(
            SaveUserCommand(id="u1", name="Ana", email="a@x.io", user_type="admin", is_update=True)
        )
        assert user_id == "u1"

    def test_update_without_id_raises(self) -> None:
        repo = MagicMock(spec=UserRepository)
        with pytest.raises(MissingIdentifierError) as exc_info:
            ManageUsersUseCase(repo).save(
                SaveUserCommand(name="Ana", email="a@x.io", user_type="admin", is_update=True)
            )
        assert exc_info.value.message == "User ID is required for update"
        repo.save.assert_not_called()

    def test_list_pages_when_page_and_limit_given(self) -> None:
        repo = MagicMock(spec=UserRepository)
        repo.list.return_value = []
        ManageUsersUseCase(repo).list(ListUsersQuery(page=3, limit=10))
        repo.list.assert_called_once_with(limit=10, offset=20)

    def test_list_unpaged_otherwise(self) -> None:
        repo = MagicMock(spec=UserRepository)
        repo.list.return_value = []
        ManageUsersUseCase(repo).list(ListUsersQuery(page=2))
        repo.list.assert_called_once_with()


class TestManageCategoriesUseCase:
    """Tests for the category and subcategory use cases."""

    def test_save_category(self) -> None:
        repo = MagicMock(spec=CategoryRepository)
        category_id = ManageCategoriesUseCase(repo).save(SaveCategoryCommand(name="Books"))
        assert repo.save.call_args.args[0].id == category_id

    def test_update_category_without_id_raises(self) -> None:
        repo = MagicMock(spec=CategoryRepository)
        with pytest.raises(MissingIdentifierError):
            ManageCategoriesUseCase(repo).save(SaveCategoryCommand(name="Books", is_update=True))

    def test_list_subcategories_passes_filter(self) -> None:
        repo = MagicMock(spec=SubcategoryRepository)
        repo.list.return_value = []
        ManageSubcategoriesUseCase(repo).list(category_id="c1")
        repo.list.assert_called_once_with(category_id="c1")

    def test_save_subcategory(self) -> None:
        repo = MagicMock(spec=SubcategoryRepository)
        ManageSubcategoriesUseCase(repo).save(
            SaveSubcategoryCommand(category_id="c1", name="Novels", id="s1")
        )
        saved = repo.save.call_args.args[0]
        assert (saved.id, saved.category_id) == ("s1", "c1")


class TestManageSummariesUseCase:
    """Tests for the ManageSummariesUseCase."""

    def test_save_summary(self) -> None:
        repo = MagicMock(spec=SummaryRepository)
        summary_id = ManageSummariesUseCase(repo).save(
            SaveSummaryCommand(
                title="T", description="", content="C", user_id="u1", category_id="c1"
            )
        )
        saved = repo.save.call_args.args[0]
        assert saved.id == summary_id
        assert saved.category_id == "c1"
        assert saved.subcategory_id is None

    def test_list_forwards_options(self) -> None:
        repo = MagicMock(spec=SummaryRepository)
        repo.list.return_value = SummaryPage()
        ManageSummariesUseCase(repo).list(
            ListSummariesQuery(subcategory_id="s1", limit=5, offset=10)
        )
        repo.list.assert_called_once_with(
            SummaryListOptions(subcategory_id="s1", limit=5, offset=10)
        )

    def test_delete_delegates(self) -> None:
        repo = MagicMock(spec=SummaryRepository)
        ManageSummariesUseCase(repo).delete("x")
        repo.delete.assert_called_once_with("x")
