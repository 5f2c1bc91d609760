"""Category repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from blog.domain.error import CreateCategoryError, DeleteCategoryError, GetCategoryError
from blog.domain.model.category import Category
from blog.domain.repository.result import RepositoryResult
from blog.domain.value import CategoryId


class CategoryRepository(ABC):
    """Repository interface for Category entities."""

    @abstractmethod
    async def find_all(self) -> list[Category]:
        """Find all categories ordered by name."""
        pass

    @abstractmethod
    async def find_by_id(
        self, category_id: str | UUID
    ) -> RepositoryResult[Category, GetCategoryError]:
        """Find category by ID.

        Args:
            category_id: Category identifier

        Returns:
            Category, or CATEGORY_NOT_FOUND / CANNOT_GET_CATEGORY
        """
        pass

    @abstractmethod
    async def create(self, name: str) -> RepositoryResult[Category, CreateCategoryError]:
        """Create a category.

        Args:
            name: Unique category name

        Returns:
            Created category, or DUPLICATE_CATEGORY_NAME / CANNOT_CREATE_CATEGORY
        """
        pass

    @abstractmethod
    async def delete(
        self, category_id: str | UUID
    ) -> RepositoryResult[CategoryId, DeleteCategoryError]:
        """Delete a category; posts filed under it lose their category.

        Args:
            category_id: Category identifier

        Returns:
            Deleted ID, or CATEGORY_NOT_FOUND / CANNOT_DELETE_CATEGORY
        """
        pass
