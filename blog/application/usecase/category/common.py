"""Shared category representation for use case responses."""

from datetime import datetime

from pydantic import BaseModel

from blog.domain.model import Category


class CategoryItem(BaseModel):
    """Category as returned to callers."""

    id: str
    name: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, category: Category) -> "CategoryItem":
        return cls(
            id=str(category.id),
            name=category.name,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )


class CategoryResponse(BaseModel):
    category: CategoryItem


class ListCategoriesResponse(BaseModel):
    categories: list[CategoryItem]
