"""Domain value objects for the blog."""

from blog.domain.value.identifiers import CategoryId, PostId, TagId
from blog.domain.value.types import Slug

__all__ = [
    # Identifiers
    "PostId",
    "CategoryId",
    "TagId",
    # Types
    "Slug",
]
