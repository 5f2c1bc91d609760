"""Domain model entities for the blog."""

from blog.domain.model.category import Category
from blog.domain.model.post import Post
from blog.domain.model.tag import Tag

__all__ = [
    "Post",
    "Category",
    "Tag",
]
