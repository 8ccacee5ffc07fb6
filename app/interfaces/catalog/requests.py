"""
Request records for the catalog API.

Each record is a mutable dataclass filled by the binder, followed by
its record description: where each field comes from and the rules it
must satisfy. Descriptions are checked when this module is imported.
"""

from dataclasses import dataclass
from typing import Optional

from app.shared.binding import FieldSpec, RecordSchema

# ── Users ────────────────────────────────────────────────────────


@dataclass
class SaveUserRequest:
    id: Optional[str] = None
    name: str = ""
    email: str = ""
    user_type: str = ""


SAVE_USER = RecordSchema(
    SaveUserRequest,
    [
        FieldSpec("id", str, optional=True, body="id", path="id", label="ID"),
        FieldSpec("name", str, body="name", rules="required,max=100"),
        FieldSpec("email", str, body="email", rules="required,max=255"),
        FieldSpec("user_type", str, body="user_type", rules="required"),
    ],
)


@dataclass
class ListUserRequest:
    page: int = 0
    limit: int = 0


LIST_USERS = RecordSchema(
    ListUserRequest,
    [
        FieldSpec("page", int, query="page", rules="min=1,max=1000000"),
        FieldSpec("limit", int, query="limit", rules="min=1,max=100"),
    ],
)


@dataclass
class UserIdRequest:
    """Detail and delete requests: the id comes from the path."""

    id: str = ""


USER_ID = RecordSchema(
    UserIdRequest,
    [FieldSpec("id", str, path="id", rules="required", label="ID")],
)

# ── Categories ───────────────────────────────────────────────────


@dataclass
class SaveCategoryRequest:
    id: str = ""
    name: str = ""


SAVE_CATEGORY = RecordSchema(
    SaveCategoryRequest,
    [
        FieldSpec("id", str, body="id", path="id", label="ID"),
        FieldSpec("name", str, body="name", rules="required,max=255"),
    ],
)


@dataclass
class CategoryIdRequest:
    id: str = ""


CATEGORY_ID = RecordSchema(
    CategoryIdRequest,
    [FieldSpec("id", str, body="id", path="id", rules="required", label="ID")],
)

# ── Subcategories ────────────────────────────────────────────────


@dataclass
class SaveSubcategoryRequest:
    id: str = ""
    category_id: str = ""
    name: str = ""


SAVE_SUBCATEGORY = RecordSchema(
    SaveSubcategoryRequest,
    [
        FieldSpec("id", str, body="id", path="id", label="ID"),
        FieldSpec(
            "category_id", str, body="category_id", rules="required", label="CategoryID"
        ),
        FieldSpec("name", str, body="name", rules="required,max=255"),
    ],
)


@dataclass
class ListSubcategoryRequest:
    category_id: str = ""


LIST_SUBCATEGORIES = RecordSchema(
    ListSubcategoryRequest,
    [
        FieldSpec(
            "category_id",
            str,
            body="category_id",
            query="category_id",
            label="CategoryID",
        ),
    ],
)


@dataclass
class SubcategoryIdRequest:
    id: str = ""


SUBCATEGORY_ID = RecordSchema(
    SubcategoryIdRequest,
    [FieldSpec("id", str, body="id", path="id", rules="required", label="ID")],
)

# ── Summaries ────────────────────────────────────────────────────


@dataclass
class SaveSummaryRequest:
    id: Optional[str] = None
    title: str = ""
    description: str = ""
    content: str = ""
    category_id: Optional[str] = None
    subcategory_id: Optional[str] = None
    user_id: str = ""


SAVE_SUMMARY = RecordSchema(
    SaveSummaryRequest,
    [
        FieldSpec("id", str, optional=True, body="id", path="id", label="ID"),
        FieldSpec("title", str, body="title", rules="required,max=255"),
        FieldSpec("description", str, body="description", rules="max=5000"),
        FieldSpec("content", str, body="content", rules="required"),
        FieldSpec(
            "category_id", str, optional=True, body="category_id", label="CategoryID"
        ),
        FieldSpec(
            "subcategory_id",
            str,
            optional=True,
            body="subcategory_id",
            label="SubcategoryID",
        ),
        FieldSpec("user_id", str, body="user_id", label="UserID"),
    ],
)


@dataclass
class ListSummaryRequest:
    category_id: Optional[str] = None
    subcategory_id: Optional[str] = None
    limit: int = 0
    offset: int = 0


LIST_SUMMARIES = RecordSchema(
    ListSummaryRequest,
    [
        FieldSpec(
            "category_id", str, optional=True, query="category_id", label="CategoryID"
        ),
        FieldSpec(
            "subcategory_id",
            str,
            optional=True,
            query="subcategory_id",
            label="SubcategoryID",
        ),
        FieldSpec("limit", int, query="limit", rules="min=1,max=100"),
        FieldSpec("offset", int, query="offset", rules="min=0"),
    ],
)


@dataclass
class SummaryIdRequest:
    id: str = ""


SUMMARY_ID = RecordSchema(
    SummaryIdRequest,
    [FieldSpec("id", str, path="id", rules="required", label="ID")],
)
