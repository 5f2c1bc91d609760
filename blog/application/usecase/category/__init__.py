"""Category use cases."""

from .common import CategoryItem, CategoryResponse, ListCategoriesResponse
from .manage_categories import (
    CreateCategoryRequest,
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryUseCase,
    ListCategoriesUseCase,
)

__all__ = [
    "CategoryItem",
    "CategoryResponse",
    "CreateCategoryRequest",
    "CreateCategoryUseCase",
    "DeleteCategoryUseCase",
    "GetCategoryUseCase",
    "ListCategoriesResponse",
    "ListCategoriesUseCase",
]
