"""Tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status

from blog.application.usecase.tag import (
    CreateTagRequest,
    CreateTagUseCase,
    DeleteTagUseCase,
    GetTagUseCase,
    ListTagsResponse,
    ListTagsUseCase,
    TagResponse,
)

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListTagsResponse,
    summary="List all available tags",
    description="Get a list of all available tags for labelling posts.",
)
async def list_tags(use_case: FromDishka[ListTagsUseCase]) -> ListTagsResponse:
    """List all available tags.

    Example:
        GET /tags
    """
    return await use_case.execute()


@router.get("/{tag_id}", response_model=TagResponse)
async def get_tag(tag_id: str, use_case: FromDishka[GetTagUseCase]) -> TagResponse:
    return await use_case.execute(tag_id)


@router.post("", response_model=TagResponse, status_code=status.HTTP_201_CREATED)
async def create_tag(
    request: CreateTagRequest,
    use_case: FromDishka[CreateTagUseCase],
) -> TagResponse:
    """Create a tag. Names are unique."""
    return await use_case.execute(request)


@router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tag(tag_id: str, use_case: FromDishka[DeleteTagUseCase]) -> Response:
    """Delete a tag and detach it from every post."""
    await use_case.execute(tag_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
