"""Create post use case."""

import logfire
from pydantic import BaseModel, Field

from blog.domain.error import CreatePostError, OperationError
from blog.domain.repository import PostRepository
from blog.application.usecase.post.common import PostItem, PostResponse

_DETAILS = {
    CreatePostError.DUPLICATE_POST_TITLE: "A post with this title already exists",
    CreatePostError.CATEGORY_NOT_FOUND: "Category does not exist",
    CreatePostError.CANNOT_CREATE_POST: "Post could not be created",
}


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    category_id: str | None = None
    published: bool | None = None  # None stores the default (unpublished)
    tag_ids: list[str] = Field(default_factory=list)


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize create post use case.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            Created post with resolved category and tags

        Raises:
            OperationError: If the repository reports a failure
        """
        with logfire.span(
            "create_post.execute",
            title=request.title,
            category_id=request.category_id,
            tag_count=len(request.tag_ids),
        ):
            result = await self.post_repository.create(
                title=request.title,
                content=request.content,
                category_id=request.category_id,
                published=request.published,
                tag_ids=request.tag_ids,
            )
            if result.error is not None:
                raise OperationError(result.error, _DETAILS[result.error])

            return PostResponse(post=PostItem.from_domain(result.data))
