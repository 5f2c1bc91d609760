"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from blog.domain.model import Category, Post, Tag
from blog.domain.value import CategoryId, PostId, Slug, TagId
from blog.persistence.error import InvalidIdentifierError


def parse_identifier(value: str | UUID) -> UUID:
    """Convert an incoming identifier to a UUID.

    Args:
        value: Identifier as received from the caller

    Returns:
        Parsed UUID

    Raises:
        InvalidIdentifierError: If the value is not a valid UUID
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError as e:
        raise InvalidIdentifierError(value) from e


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_post(
    row: Dict[str, Any],
    category: Optional[str] = None,
    tag_names: Optional[list[str]] = None,
) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict (the normalized title is ignored)
        category: Resolved category name
        tag_names: Resolved tag names

    Returns:
        Post domain model
    """
    category_id = row.get("category_id")
    return Post(
        id=PostId(_as_uuid(row["id"])),
        title=row["title"],
        slug=Slug(row["slug"]),
        content=row["content"],
        published=row["published"],
        category_id=CategoryId(_as_uuid(category_id)) if category_id else None,
        category=category,
        tags=tag_names or [],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_category(row: Dict[str, Any]) -> Category:
    """Convert database row to Category domain model."""
    return Category(
        id=CategoryId(_as_uuid(row["id"])),
        name=row["name"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(_as_uuid(row["id"])),
        name=row["name"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
