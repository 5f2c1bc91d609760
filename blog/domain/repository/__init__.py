"""Repository interfaces."""

from blog.domain.repository.category import CategoryRepository
from blog.domain.repository.post import PostRepository
from blog.domain.repository.result import RepositoryResult
from blog.domain.repository.tag import TagRepository

__all__ = [
    "CategoryRepository",
    "PostRepository",
    "RepositoryResult",
    "TagRepository",
]
