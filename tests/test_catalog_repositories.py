"""
Tests for the SQLAlchemy repository adapters against in-memory SQLite.
"""

import pytest
from sqlalchemy import select

from app.domain.catalog.entities import (
    Category,
    Subcategory,
    Summary,
    SummaryListOptions,
    User,
)
from app.domain.catalog.errors import RecordNotFoundError
from app.infrastructure.catalog.category_repository import CategoryRepositoryAdapter
from app.infrastructure.catalog.subcategory_repository import (
    SubcategoryRepositoryAdapter,
)
from app.infrastructure.catalog.summary_repository import SummaryRepositoryAdapter
from app.infrastructure.catalog.user_repository import UserRepositoryAdapter
from app.infrastructure.database.schema import users


class TestUserRepository:
    """Upsert, paging and soft delete for users."""

    def test_save_then_detail(self, engine) -> None:
        repo = UserRepositoryAdapter(engine)
        repo.save(User(id="u1", name="Ana", email="a@x.io", user_type="admin"))

        user = repo.detail("u1")
        assert (user.name, user.email, user.user_type) == ("Ana", "a@x.io", "admin")
        assert user.created_at is not None

    def test_save_existing_id_updates(self, engine) -> None:
        repo = UserRepositoryAdapter(engine)
        repo.save(User(id="u1", name="Ana", email="a@x.io", user_type="admin"))
        repo.save(User(id="u1", name="Ana B", email="a@x.io", user_type="reader"))

        assert len(repo.list()) == 1
        assert repo.detail("u1").name == "Ana B"

    def test_list_with_limit_and_offset(self, engine) -> None:
        repo = UserRepositoryAdapter(engine)
        for i in range(5):
            repo.save(User(id=f"u{i}", name=f"N{i}", email="e", user_type="t"))

        assert len(repo.list(limit=2)) == 2
        assert len(repo.list(limit=2, offset=4)) == 1
        assert len(repo.list()) == 5

    def test_delete_is_soft(self, engine) -> None:
        repo = UserRepositoryAdapter(engine)
        repo.save(User(id="u1", name="Ana", email="a@x.io", user_type="admin"))
        repo.delete("u1")

        with pytest.raises(RecordNotFoundError):
            repo.detail("u1")
        assert repo.list() == []
        with engine.connect() as conn:
            row = conn.execute(select(users).where(users.c.id == "u1")).mappings().one()
        assert row["deleted_at"] is not None

    def test_delete_missing_raises(self, engine) -> None:
        with pytest.raises(RecordNotFoundError):
            UserRepositoryAdapter(engine).delete("nope")


class TestCategoryRepositories:
    """Categories and their subcategories."""

    def test_subcategory_reads_back_its_category(self, engine) -> None:
        CategoryRepositoryAdapter(engine).save(Category(id="c1", name="Books"))
        repo = SubcategoryRepositoryAdapter(engine)
        repo.save(Subcategory(id="s1", category_id="c1", name="Novels"))

        subcategory = repo.detail("s1")
        assert subcategory.category is not None
        assert subcategory.category.name == "Books"

    def test_list_subcategories_by_category(self, engine) -> None:
        categories = CategoryRepositoryAdapter(engine)
        categories.save(Category(id="c1", name="Books"))
        categories.save(Category(id="c2", name="Films"))
        repo = SubcategoryRepositoryAdapter(engine)
        repo.save(Subcategory(id="s1", category_id="c1", name="Novels"))
        repo.save(Subcategory(id="s2", category_id="c2", name="Drama"))

        assert [s.id for s in repo.list(category_id="c1")] == ["s1"]
        assert len(repo.list()) == 2

    def test_deleted_category_hidden(self, engine) -> None:
        repo = CategoryRepositoryAdapter(engine)
        repo.save(Category(id="c1", name="Books"))
        repo.delete("c1")
        assert repo.list() == []
        with pytest.raises(RecordNotFoundError):
            repo.detail("c1")


class TestSummaryRepository:
    """Joins, filters and paging for summaries."""

    @pytest.fixture
    def seeded(self, engine):
        UserRepositoryAdapter(engine).save(
            User(id="u1", name="Ana", email="a@x.io", user_type="admin")
        )
        CategoryRepositoryAdapter(engine).save(Category(id="c1", name="Books"))
        SubcategoryRepositoryAdapter(engine).save(
            Subcategory(id="s1", category_id="c1", name="Novels")
        )
        repo = SummaryRepositoryAdapter(engine)
        for i in range(3):
            repo.save(
                Summary(
                    id=f"b{i}",
                    title=f"Book {i}",
                    description="",
                    content="text",
                    user_id="u1",
                    category_id="c1",
                    subcategory_id="s1",
                )
            )
        repo.save(
            Summary(id="x", title="Loose", description="d", content="text", user_id="u1")
        )
        return repo

    def test_detail_joins_related_records(self, seeded) -> None:
        summary = seeded.detail("b0")
        assert summary.user is not None and summary.user.name == "Ana"
        assert summary.category is not None and summary.category.name == "Books"
        assert summary.subcategory is not None and summary.subcategory.name == "Novels"

    def test_detail_without_category(self, seeded) -> None:
        summary = seeded.detail("x")
        assert summary.category is None
        assert summary.subcategory is None

    def test_deleted_category_not_joined(self, seeded, engine) -> None:
        CategoryRepositoryAdapter(engine).delete("c1")
        SubcategoryRepositoryAdapter(engine).delete("s1")
        summary = seeded.detail("b0")
        assert summary.category_id == "c1"
        assert summary.category is None
        assert summary.subcategory is None

    def test_default_page(self, seeded) -> None:
        page = seeded.list(SummaryListOptions(limit=0))
        assert (page.total, page.limit, page.offset, page.has_next) == (4, 20, 0, False)
        assert len(page.items) == 4

    def test_has_next(self, seeded) -> None:
        first = seeded.list(SummaryListOptions(limit=3))
        last = seeded.list(SummaryListOptions(limit=3, offset=3))
        assert (len(first.items), first.has_next) == (3, True)
        assert (len(last.items), last.has_next) == (1, False)
        assert {s.id for s in first.items + last.items} == {"b0", "b1", "b2", "x"}

    def test_filter_total_counts_matches_only(self, seeded) -> None:
        page = seeded.list(SummaryListOptions(category_id="c1", limit=2))
        assert page.total == 3
        assert len(page.items) == 2
        assert page.has_next is True

    def test_deleted_summary_excluded(self, seeded) -> None:
        seeded.delete("x")
        page = seeded.list(SummaryListOptions())
        assert page.total == 3
        with pytest.raises(RecordNotFoundError):
            seeded.detail("x")
