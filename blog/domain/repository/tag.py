"""Tag repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from blog.domain.error import CreateTagError, DeleteTagError, GetTagError
from blog.domain.model.tag import Tag
from blog.domain.repository.result import RepositoryResult
from blog.domain.value import TagId


class TagRepository(ABC):
    """Repository interface for Tag entities."""

    @abstractmethod
    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: str | UUID) -> RepositoryResult[Tag, GetTagError]:
        """Find tag by ID.

        Args:
            tag_id: Tag identifier

        Returns:
            Tag, or TAG_NOT_FOUND / CANNOT_GET_TAG
        """
        pass

    @abstractmethod
    async def create(self, name: str) -> RepositoryResult[Tag, CreateTagError]:
        """Create a tag.

        Args:
            name: Unique tag name

        Returns:
            Created tag, or DUPLICATE_TAG_NAME / CANNOT_CREATE_TAG
        """
        pass

    @abstractmethod
    async def delete(self, tag_id: str | UUID) -> RepositoryResult[TagId, DeleteTagError]:
        """Delete a tag and its associations with posts.

        Args:
            tag_id: Tag identifier

        Returns:
            Deleted ID, or TAG_NOT_FOUND / CANNOT_DELETE_TAG
        """
        pass
