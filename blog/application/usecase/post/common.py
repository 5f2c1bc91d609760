"""Shared post representation for use case responses."""

from datetime import datetime

from pydantic import BaseModel

from blog.domain.model import Post


class PostItem(BaseModel):
    """Post as returned to callers."""

    id: str
    title: str
    slug: str
    content: str
    published: bool
    category_id: str | None
    category: str | None
    tags: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostItem":
        return cls(
            id=str(post.id),
            title=post.title,
            slug=str(post.slug),
            content=post.content,
            published=post.published,
            category_id=str(post.category_id) if post.category_id else None,
            category=post.category,
            tags=list(post.tags),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class PostResponse(BaseModel):
    """Single post response."""

    post: PostItem
