"""Update post use case."""

import logfire
from pydantic import BaseModel

from blog.domain.error import GetPostError, OperationError, UpdatePostError
from blog.domain.repository import PostRepository
from blog.application.usecase.post.common import PostItem, PostResponse

_DETAILS = {
    UpdatePostError.DUPLICATE_POST_TITLE: "A post with this title already exists",
    UpdatePostError.CATEGORY_NOT_FOUND: "Category does not exist",
    UpdatePostError.CANNOT_UPDATE_POST: "Post could not be updated",
}


class UpdatePostRequest(BaseModel):
    """Update post request.

    Every field except ``post_id`` is optional. Fields left unset keep their
    stored value; an explicit ``category_id=None`` removes the category.
    """

    post_id: str
    title: str | None = None
    content: str | None = None
    category_id: str | None = None
    published: bool | None = None
    tag_ids: list[str] | None = None  # None leaves the tag set untouched


class UpdatePostUseCase:
    """Use case for partially updating a post."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize update post use case.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def execute(self, request: UpdatePostRequest) -> PostResponse:
        """Execute update post flow.

        1. Retrieve the existing post
        2. Merge the fields the caller did not send from it
        3. Update via the repository

        Args:
            request: Update post request

        Returns:
            Updated post with resolved category and tags

        Raises:
            OperationError: If the post is missing or the update fails
        """
        with logfire.span("update_post.execute", post_id=request.post_id):
            existing = await self.post_repository.find_by_id(request.post_id)
            if existing.error is GetPostError.POST_NOT_FOUND:
                raise OperationError(
                    existing.error, f"Post not found: {request.post_id}"
                )
            if existing.error is not None:
                raise OperationError(existing.error, "Post could not be retrieved")
            post = existing.data

            provided = request.model_fields_set
            if "category_id" in provided:
                category_id = request.category_id
            else:
                category_id = str(post.category_id) if post.category_id else None

            result = await self.post_repository.update(
                post_id=request.post_id,
                title=request.title if request.title is not None else post.title,
                content=(
                    request.content if request.content is not None else post.content
                ),
                category_id=category_id,
                published=request.published,
                tag_ids=request.tag_ids,
            )
            if result.error is not None:
                raise OperationError(result.error, _DETAILS[result.error])

            return PostResponse(post=PostItem.from_domain(result.data))
