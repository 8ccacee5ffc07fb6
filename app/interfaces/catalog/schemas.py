"""
Pydantic schemas for catalog API responses.

Requests are not modelled here: they are bound and validated by the
binding engine from the records in ``requests.py``. These schemas only
define the response contract.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from app.domain.catalog.entities import Category, Subcategory, Summary, User


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    version: str


class DatabaseHealthResponse(BaseModel):
    """Response schema for the database health endpoint."""

    message: str


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str
    detail: Optional[str] = None


class BindingErrorResponse(BaseModel):
    """Response for a request that failed binding or validation.

    Attributes:
        field: Label of the offending field (e.g. "Title").
        message: Human-readable reason.
    """

    field: str
    message: str


# ── Items ────────────────────────────────────────────────────────


class UserItem(BaseModel):
    id: str
    name: str
    email: str
    user_type: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserItem":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            user_type=user.user_type,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class CategoryItem(BaseModel):
    id: str
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryItem":
        return cls(
            id=category.id,
            name=category.name,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )


class SubcategoryItem(BaseModel):
    id: str
    category_id: str
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    category: Optional[CategoryItem] = None

    @classmethod
    def from_entity(cls, subcategory: Subcategory) -> "SubcategoryItem":
        return cls(
            id=subcategory.id,
            category_id=subcategory.category_id,
            name=subcategory.name,
            created_at=subcategory.created_at,
            updated_at=subcategory.updated_at,
            category=(
                CategoryItem.from_entity(subcategory.category)
                if subcategory.category
                else None
            ),
        )


class SummaryItem(BaseModel):
    """A summary with its author and filing, when known."""

    id: str
    title: str
    description: str
    content: str
    user_id: str
    category_id: Optional[str] = None
    subcategory_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    user: Optional[UserItem] = None
    category: Optional[CategoryItem] = None
    subcategory: Optional[SubcategoryItem] = None

    @classmethod
    def from_entity(cls, summary: Summary) -> "SummaryItem":
        return cls(
            id=summary.id,
            title=summary.title,
            description=summary.description,
            content=summary.content,
            user_id=summary.user_id,
            category_id=summary.category_id,
            subcategory_id=summary.subcategory_id,
            created_at=summary.created_at,
            updated_at=summary.updated_at,
            user=UserItem.from_entity(summary.user) if summary.user else None,
            category=(
                CategoryItem.from_entity(summary.category) if summary.category else None
            ),
            subcategory=(
                SubcategoryItem.from_entity(summary.subcategory)
                if summary.subcategory
                else None
            ),
        )


# ── Responses ────────────────────────────────────────────────────


class SaveUserResponse(BaseModel):
    user_id: str


class UserListResponse(BaseModel):
    users: list[UserItem]
    total: int


class UserDetailResponse(BaseModel):
    user: UserItem


class SaveCategoryResponse(BaseModel):
    category_id: str


class CategoryListResponse(BaseModel):
    categories: list[CategoryItem]


class CategoryDetailResponse(BaseModel):
    category: CategoryItem


class SaveSubcategoryResponse(BaseModel):
    subcategory_id: str


class SubcategoryListResponse(BaseModel):
    subcategories: list[SubcategoryItem]


class SubcategoryDetailResponse(BaseModel):
    subcategory: SubcategoryItem


class SaveSummaryResponse(BaseModel):
    summary_id: str


class SummaryListResponse(BaseModel):
    """One page of summaries.

    Attributes:
        summaries: Items on this page, newest first.
        total: Number of summaries matching the filters.
        limit: Page size used.
        offset: Offset used.
        has_next: True if another page follows.
    """

    summaries: list[SummaryItem]
    total: int
    limit: int
    offset: int
    has_next: bool


class SummaryDetailResponse(BaseModel):
    summary: SummaryItem
