"""
SQLAlchemy Core table definitions for the catalog database.

Every table carries created_at/updated_at timestamps and a nullable
deleted_at column; rows are soft-deleted and hidden from reads once
deleted_at is set.
"""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)

metadata = MetaData()


def _timestamps() -> list[Column]:
    return [
        Column("created_at", DateTime(timezone=True), nullable=False),
        Column("updated_at", DateTime(timezone=True), nullable=False),
        Column("deleted_at", DateTime(timezone=True)),
    ]


users = Table(
    "users",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("email", String(255), nullable=False),
    Column("user_type", String(50), nullable=False),
    *_timestamps(),
)

categories = Table(
    "categories",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(255), nullable=False),
    *_timestamps(),
)

subcategories = Table(
    "subcategories",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("category_id", String(64), ForeignKey("categories.id"), nullable=False),
    Column("name", String(255), nullable=False),
    *_timestamps(),
)

summaries = Table(
    "summaries",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=False, default=""),
    Column("content", Text, nullable=False),
    Column("category_id", String(64), ForeignKey("categories.id")),
    Column("subcategory_id", String(64), ForeignKey("subcategories.id")),
    Column("user_id", String(64), nullable=False),
    *_timestamps(),
    Index("ix_summaries_category_id", "category_id"),
    Index("ix_summaries_subcategory_id", "subcategory_id"),
)
