"""Delete post use case."""

import logfire

from blog.domain.error import DeletePostError, OperationError
from blog.domain.repository import PostRepository
from blog.domain.value import PostId


class DeletePostUseCase:
    """Use case for deleting a post with its tag associations."""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str) -> PostId:
        """Execute delete post flow.

        Returns:
            ID of the deleted post

        Raises:
            OperationError: If the post is missing or cannot be deleted
        """
        result = await self.post_repository.delete(post_id)

        if result.error is DeletePostError.POST_NOT_FOUND:
            raise OperationError(result.error, f"Post not found: {post_id}")
        if result.error is not None:
            raise OperationError(result.error, "Post could not be deleted")

        logfire.info("Post deletion completed", post_id=str(result.data))
        return result.data
