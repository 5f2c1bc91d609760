"""Post aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import CategoryId, PostId, Slug


class Post(DomainModel):
    """Post aggregate root.

    A post optionally belongs to one category and carries any number of
    tags. ``category`` and ``tags`` hold resolved names, not ids; the
    normalized title used for uniqueness never leaves the persistence layer.
    """

    id: PostId
    title: str
    slug: Slug
    content: str
    published: bool = False
    category_id: Optional[CategoryId] = None
    category: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
