"""List posts use case."""

import logfire
from pydantic import BaseModel

from blog.domain.repository import PostRepository
from blog.application.usecase.post.common import PostItem


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]


class ListPostsUseCase:
    """Use case for listing every post."""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self) -> ListPostsResponse:
        """Execute list posts flow.

        Raises:
            PersistenceError: If the store cannot be read
        """
        posts = await self.post_repository.find_all()
        logfire.info("Posts listed", count=len(posts))
        return ListPostsResponse(posts=[PostItem.from_domain(post) for post in posts])
