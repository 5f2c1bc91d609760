"""Category use cases."""

import logfire
from pydantic import BaseModel, Field

from blog.domain.error import (
    CreateCategoryError,
    DeleteCategoryError,
    GetCategoryError,
    OperationError,
)
from blog.domain.repository import CategoryRepository
from blog.domain.value import CategoryId
from blog.application.usecase.category.common import (
    CategoryItem,
    CategoryResponse,
    ListCategoriesResponse,
)


class CreateCategoryRequest(BaseModel):
    """Create category request."""

    name: str = Field(min_length=1, max_length=255)


class ListCategoriesUseCase:
    """Use case for listing categories by name."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        self.category_repository = category_repository

    async def execute(self) -> ListCategoriesResponse:
        categories = await self.category_repository.find_all()
        return ListCategoriesResponse(
            categories=[CategoryItem.from_domain(c) for c in categories]
        )


class GetCategoryUseCase:
    """Use case for retrieving a category by ID."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        self.category_repository = category_repository

    async def execute(self, category_id: str) -> CategoryResponse:
        """Execute get category flow.

        Raises:
            OperationError: If the category is missing or cannot be read
        """
        result = await self.category_repository.find_by_id(category_id)

        if result.error is GetCategoryError.CATEGORY_NOT_FOUND:
            raise OperationError(result.error, f"Category not found: {category_id}")
        if result.error is not None:
            raise OperationError(result.error, "Category could not be retrieved")

        return CategoryResponse(category=CategoryItem.from_domain(result.data))


class CreateCategoryUseCase:
    """Use case for creating a category."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        self.category_repository = category_repository

    async def execute(self, request: CreateCategoryRequest) -> CategoryResponse:
        """Execute create category flow.

        Raises:
            OperationError: If the name is taken or the insert fails
        """
        with logfire.span("create_category.execute", name=request.name):
            result = await self.category_repository.create(request.name)

            if result.error is CreateCategoryError.DUPLICATE_CATEGORY_NAME:
                raise OperationError(
                    result.error, f"Category already exists: {request.name}"
                )
            if result.error is not None:
                raise OperationError(result.error, "Category could not be created")

            return CategoryResponse(category=CategoryItem.from_domain(result.data))


class DeleteCategoryUseCase:
    """Use case for deleting a category.

    Posts filed under the category stay and become uncategorized.
    """

    def __init__(self, category_repository: CategoryRepository) -> None:
        self.category_repository = category_repository

    async def execute(self, category_id: str) -> CategoryId:
        """Execute delete category flow.

        Raises:
            OperationError: If the category is missing or cannot be deleted
        """
        result = await self.category_repository.delete(category_id)

        if result.error is DeleteCategoryError.CATEGORY_NOT_FOUND:
            raise OperationError(result.error, f"Category not found: {category_id}")
        if result.error is not None:
            raise OperationError(result.error, "Category could not be deleted")

        return result.data
