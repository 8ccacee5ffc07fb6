"""
Domain entities for the catalog bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

DEFAULT_PAGE_LIMIT = 20


def new_id() -> str:
    """Generate an identifier for a new record."""
    return uuid4().hex


@dataclass(frozen=True)
class User:
    """A person who writes summaries."""

    id: str
    name: str
    email: str
    user_type: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class Category:
    """Top-level grouping for summaries."""

    id: str
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class Subcategory:
    """Second-level grouping, owned by a category."""

    id: str
    category_id: str
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    category: Optional[Category] = None


@dataclass(frozen=True)
class Summary:
    """A written summary, optionally filed under a category/subcategory.

    ``user``, ``category`` and ``subcategory`` are populated when the
    summary is read back; they are ignored on save.
    """

    id: str
    title: str
    description: str
    content: str
    user_id: str
    category_id: Optional[str] = None
    subcategory_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    user: Optional[User] = None
    category: Optional[Category] = None
    subcategory: Optional[Subcategory] = None


@dataclass(frozen=True)
class SummaryListOptions:
    """Filters and paging for listing summaries."""

    category_id: Optional[str] = None
    subcategory_id: Optional[str] = None
    limit: int = DEFAULT_PAGE_LIMIT
    offset: int = 0


@dataclass(frozen=True)
class SummaryPage:
    """One page of summaries.

    Attributes:
        items: Summaries on this page, newest first.
        total: Number of summaries matching the filters.
        limit: Page size used.
        offset: Offset used.
        has_next: True if more summaries follow this page.
    """

    items: list[Summary] = field(default_factory=list)
    total: int = 0
    limit: int = DEFAULT_PAGE_LIMIT
    offset: int = 0
    has_next: bool = False
