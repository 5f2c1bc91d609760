"""Post repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import List, Optional
from uuid import UUID

from blog.domain.error import (
    CreatePostError,
    DeletePostError,
    GetPostError,
    UpdatePostError,
)
from blog.domain.model.post import Post
from blog.domain.repository.result import RepositoryResult
from blog.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Owns the invariant "one authoritative post row plus consistent
    side-tables": every operation runs in a single transaction, and every
    classified storage failure comes back as an error kind instead of an
    exception. Identifiers are accepted as strings because they arrive
    unvalidated from the request layer; a malformed identifier behaves like
    one that does not exist.
    """

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """List all posts with their category name and tag names.

        Returns:
            Posts in storage order

        Raises:
            PersistenceError: If the store cannot be read
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, post_id: str | UUID
    ) -> RepositoryResult[Post, GetPostError]:
        """Find a post by ID.

        Args:
            post_id: The post's identifier

        Returns:
            The post, or POST_NOT_FOUND / CANNOT_GET_POST
        """
        pass

    @abstractmethod
    async def create(
        self,
        title: str,
        content: str,
        category_id: Optional[str | UUID] = None,
        published: Optional[bool] = None,
        tag_ids: Sequence[str | UUID] = (),
    ) -> RepositoryResult[Post, CreatePostError]:
        """Create a post.

        When a category is given the tag ids are not associated; tags are
        only linked to posts created without a category.

        Args:
            title: Post title, unique under normalized comparison
            content: Post body
            category_id: Optional category reference
            published: Publication flag, store default (False) when None
            tag_ids: Tags to associate; unknown ids are dropped

        Returns:
            The created post, or DUPLICATE_POST_TITLE / CATEGORY_NOT_FOUND /
            CANNOT_CREATE_POST
        """
        pass

    @abstractmethod
    async def update(
        self,
        post_id: str | UUID,
        title: str,
        content: str,
        category_id: Optional[str | UUID],
        published: Optional[bool],
        tag_ids: Optional[Sequence[str | UUID]] = None,
    ) -> RepositoryResult[Post, UpdatePostError]:
        """Update a post.

        The caller is expected to have checked existence with find_by_id.

        Args:
            post_id: The post to update
            title: New title (normalized title and slug are recomputed)
            content: New body
            category_id: New category, None to detach
            published: New flag, None to keep the stored value
            tag_ids: Replacement tag set; None leaves associations untouched,
                an empty sequence clears them

        Returns:
            The updated post, or DUPLICATE_POST_TITLE / CATEGORY_NOT_FOUND /
            CANNOT_UPDATE_POST
        """
        pass

    @abstractmethod
    async def delete(
        self, post_id: str | UUID
    ) -> RepositoryResult[PostId, DeletePostError]:
        """Delete a post and its tag associations.

        Args:
            post_id: The post to delete

        Returns:
            The deleted post's ID, or POST_NOT_FOUND / CANNOT_DELETE_POST
        """
        pass
