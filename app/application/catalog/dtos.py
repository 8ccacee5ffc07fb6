"""
Data Transfer Objects for the catalog application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SaveUserCommand:
    """Input DTO for creating or updating a user.

    Attributes:
        id: Existing user id; a new one is generated when missing.
        name: Display name.
        email: Contact address.
        user_type: Account type label.
        is_update: True for PUT requests, which require an id.
    """

    name: str
    email: str
    user_type: str
    id: Optional[str] = None
    is_update: bool = False


@dataclass(frozen=True)
class ListUsersQuery:
    """Input DTO for listing users.

    Attributes:
        page: 1-based page number; 0 means "no paging".
        limit: Page size; 0 means "no paging".
    """

    page: int = 0
    limit: int = 0


@dataclass(frozen=True)
class SaveCategoryCommand:
    """Input DTO for creating or updating a category."""

    name: str
    id: Optional[str] = None
    is_update: bool = False


@dataclass(frozen=True)
class SaveSubcategoryCommand:
    """Input DTO for creating or updating a subcategory."""

    category_id: str
    name: str
    id: Optional[str] = None
    is_update: bool = False


@dataclass(frozen=True)
class SaveSummaryCommand:
    """Input DTO for creating or updating a summary.

    Attributes:
        title: Summary title.
        description: Short description, may be empty.
        content: Summary body.
        user_id: Author id.
        category_id: Optional category.
        subcategory_id: Optional subcategory.
        id: Existing summary id; a new one is generated when missing.
        is_update: True for PUT requests, which require an id.
    """

    title: str
    description: str
    content: str
    user_id: str
    category_id: Optional[str] = None
    subcategory_id: Optional[str] = None
    id: Optional[str] = None
    is_update: bool = False


@dataclass(frozen=True)
class ListSummariesQuery:
    """Input DTO for listing summaries."""

    category_id: Optional[str] = None
    subcategory_id: Optional[str] = None
    limit: int = 0
    offset: int = 0
