"""Category routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status

from blog.application.usecase.category import (
    CategoryResponse,
    CreateCategoryRequest,
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryUseCase,
    ListCategoriesResponse,
    ListCategoriesUseCase,
)

router = APIRouter(prefix="/categories", tags=["categories"], route_class=DishkaRoute)


@router.get("", response_model=ListCategoriesResponse)
async def list_categories(
    use_case: FromDishka[ListCategoriesUseCase],
) -> ListCategoriesResponse:
    """List all categories ordered by name."""
    return await use_case.execute()


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: str, use_case: FromDishka[GetCategoryUseCase]
) -> CategoryResponse:
    return await use_case.execute(category_id)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    request: CreateCategoryRequest,
    use_case: FromDishka[CreateCategoryUseCase],
) -> CategoryResponse:
    """Create a category. Names are unique."""
    return await use_case.execute(request)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: str, use_case: FromDishka[DeleteCategoryUseCase]
) -> Response:
    """Delete a category; its posts become uncategorized."""
    await use_case.execute(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
