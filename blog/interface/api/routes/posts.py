"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status
from pydantic import BaseModel, Field

from blog.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsResponse,
    ListPostsUseCase,
    PostResponse,
    UpdatePostRequest,
    UpdatePostUseCase,
)

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1)
    content: str
    category_id: str | None = None
    published: bool | None = None
    tag_ids: list[str] = Field(default_factory=list)


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post.

    Omitted fields keep their stored value. ``category_id: null`` removes
    the category; omitting ``tag_ids`` leaves the tags as they are.
    """

    title: str | None = Field(default=None, min_length=1)
    content: str | None = None
    category_id: str | None = None
    published: bool | None = None
    tag_ids: list[str] | None = None


@router.get("", response_model=ListPostsResponse)
async def list_posts(use_case: FromDishka[ListPostsUseCase]) -> ListPostsResponse:
    """List every post with its category and tags."""
    return await use_case.execute()


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: str, use_case: FromDishka[GetPostUseCase]) -> PostResponse:
    """Get a single post.

    Raises:
        OperationError: 404 when the post does not exist
    """
    return await use_case.execute(post_id)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    use_case: FromDishka[CreatePostUseCase],
) -> PostResponse:
    """Create a new post.

    Args:
        request: Post creation data
        use_case: Create post use case from DI

    Returns:
        Created post details
    """
    with logfire.span("api.create_post", title=request.title):
        return await use_case.execute(CreatePostRequest(**request.model_dump()))


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: str,
    request: UpdatePostAPIRequest,
    use_case: FromDishka[UpdatePostUseCase],
) -> PostResponse:
    """Update a post; fields left out of the body are not changed.

    Args:
        post_id: Post identifier
        request: Fields to change
        use_case: Update post use case from DI

    Returns:
        Updated post details
    """
    with logfire.span("api.update_post", post_id=post_id):
        # Only forward fields the client actually sent
        use_case_request = UpdatePostRequest(
            post_id=post_id, **request.model_dump(exclude_unset=True)
        )
        return await use_case.execute(use_case_request)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: str, use_case: FromDishka[DeletePostUseCase]) -> Response:
    """Delete a post and its tag associations."""
    await use_case.execute(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
