"""Shared tag representation for use case responses."""

from datetime import datetime

from pydantic import BaseModel

from blog.domain.model import Tag


class TagItem(BaseModel):
    """Tag as returned to callers."""

    id: str
    name: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, tag: Tag) -> "TagItem":
        return cls(
            id=str(tag.id),
            name=tag.name,
            created_at=tag.created_at,
            updated_at=tag.updated_at,
        )


class TagResponse(BaseModel):
    tag: TagItem


class ListTagsResponse(BaseModel):
    tags: list[TagItem]
