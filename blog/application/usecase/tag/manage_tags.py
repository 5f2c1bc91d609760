"""Tag use cases."""

import logfire
from pydantic import BaseModel, Field

from blog.domain.error import CreateTagError, DeleteTagError, GetTagError, OperationError
from blog.domain.repository import TagRepository
from blog.domain.value import TagId
from blog.application.usecase.tag.common import TagItem, TagResponse, ListTagsResponse


class CreateTagRequest(BaseModel):
    """Create tag request."""

    name: str = Field(min_length=1, max_length=255)


class ListTagsUseCase:
    """Use case for listing tags by name."""

    def __init__(self, tag_repository: TagRepository) -> None:
        self.tag_repository = tag_repository

    async def execute(self) -> ListTagsResponse:
        tags = await self.tag_repository.find_all()
        logfire.info("Tags listed", count=len(tags))
        return ListTagsResponse(tags=[TagItem.from_domain(tag) for tag in tags])


class GetTagUseCase:
    """Use case for retrieving a tag by ID."""

    def __init__(self, tag_repository: TagRepository) -> None:
        self.tag_repository = tag_repository

    async def execute(self, tag_id: str) -> TagResponse:
        """Execute get tag flow.

        Raises:
            OperationError: If the tag is missing or cannot be read
        """
        result = await self.tag_repository.find_by_id(tag_id)

        if result.error is GetTagError.TAG_NOT_FOUND:
            raise OperationError(result.error, f"Tag not found: {tag_id}")
        if result.error is not None:
            raise OperationError(result.error, "Tag could not be retrieved")

        return TagResponse(tag=TagItem.from_domain(result.data))


class CreateTagUseCase:
    """Use case for creating a tag."""

    def __init__(self, tag_repository: TagRepository) -> None:
        self.tag_repository = tag_repository

    async def execute(self, request: CreateTagRequest) -> TagResponse:
        """Execute create tag flow.

        Raises:
            OperationError: If the name is taken or the insert fails
        """
        result = await self.tag_repository.create(request.name)

        if result.error is CreateTagError.DUPLICATE_TAG_NAME:
            raise OperationError(result.error, f"Tag already exists: {request.name}")
        if result.error is not None:
            raise OperationError(result.error, "Tag could not be created")

        return TagResponse(tag=TagItem.from_domain(result.data))


class DeleteTagUseCase:
    """Use case for deleting a tag and detaching it from every post."""

    def __init__(self, tag_repository: TagRepository) -> None:
        self.tag_repository = tag_repository

    async def execute(self, tag_id: str) -> TagId:
        result = await self.tag_repository.delete(tag_id)

        if result.error is DeleteTagError.TAG_NOT_FOUND:
            raise OperationError(result.error, f"Tag not found: {tag_id}")
        if result.error is not None:
            raise OperationError(result.error, "Tag could not be deleted")

        return result.data
