"""SQLAlchemy table definitions for the blog.

These table definitions are used with Core statements; they match the
schema created by the Alembic migrations. Column types are kept portable
(generic ``Uuid``, ``CURRENT_TIMESTAMP`` defaults) so the same metadata
runs on PostgreSQL in production and SQLite in tests.
"""

from uuid import uuid4

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    Uuid,
    false,
    func,
    text,
)

# Metadata object for all tables
metadata = MetaData()


def _timestamps() -> list[Column]:
    return [
        Column(
            "created_at",
            DateTime(timezone=True),
            nullable=False,
            server_default=text("CURRENT_TIMESTAMP"),
        ),
        Column(
            "updated_at",
            DateTime(timezone=True),
            nullable=False,
            server_default=text("CURRENT_TIMESTAMP"),
            onupdate=func.now(),
        ),
    ]


# ============================================================================
# CATEGORIES TABLE
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", Uuid, primary_key=True, default=uuid4),
    Column("name", String(255), nullable=False, unique=True),
    *_timestamps(),
)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", Uuid, primary_key=True, default=uuid4),
    Column("name", String(255), nullable=False, unique=True),
    *_timestamps(),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Uuid, primary_key=True, default=uuid4),
    Column("title", Text, nullable=False),
    # Case/diacritic/whitespace-folded title, the uniqueness key for posts
    Column("normalized_title", Text, nullable=False, unique=True),
    Column("slug", String(100), nullable=False),
    Column("content", Text, nullable=False),
    Column("published", Boolean, nullable=False, server_default=false()),
    Column(
        "category_id",
        Uuid,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
    ),
    *_timestamps(),
)

Index("idx_posts_category_id", posts_table.c.category_id)
Index("idx_posts_slug", posts_table.c.slug)

# ============================================================================
# POST_TAGS TABLE (junction table for many-to-many relationship)
# ============================================================================
post_tags_table = Table(
    "post_tags",
    metadata,
    Column(
        "post_id",
        Uuid,
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        Uuid,
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

Index("idx_post_tags_tag_id", post_tags_table.c.tag_id)
