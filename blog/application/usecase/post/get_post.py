"""Get post use case."""

from blog.domain.error import GetPostError, OperationError
from blog.domain.repository import PostRepository
from blog.application.usecase.post.common import PostItem, PostResponse


class GetPostUseCase:
    """Use case for retrieving a post by ID."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize get post use case.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def execute(self, post_id: str) -> PostResponse:
        """Execute get post flow.

        Args:
            post_id: Post identifier as received from the caller

        Returns:
            Post details

        Raises:
            OperationError: If the post is missing or cannot be read
        """
        result = await self.post_repository.find_by_id(post_id)

        if result.error is GetPostError.POST_NOT_FOUND:
            raise OperationError(result.error, f"Post not found: {post_id}")
        if result.error is not None:
            raise OperationError(result.error, "Post could not be retrieved")

        return PostResponse(post=PostItem.from_domain(result.data))
