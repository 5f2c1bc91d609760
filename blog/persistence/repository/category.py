"""SQL implementation of Category repository."""

from uuid import UUID

import logfire
from sqlalchemy import delete, insert, select

from blog.domain.error import CreateCategoryError, DeleteCategoryError, GetCategoryError
from blog.domain.model.category import Category
from blog.domain.repository.category import CategoryRepository
from blog.domain.repository.result import RepositoryResult
from blog.domain.value import CategoryId
from blog.persistence.database import Database
from blog.persistence.error import STORAGE_ERRORS, PersistenceError, classify_failure
from blog.persistence.mappers import parse_identifier, row_to_category
from blog.persistence.tables import categories_table


class SqlCategoryRepository(CategoryRepository):
    """SQL implementation of CategoryRepository."""

    def __init__(self, database: Database) -> None:
        """Initialize repository with the storage gateway.

        Args:
            database: Storage gateway providing transactions
        """
        self.database = database

    async def find_all(self) -> list[Category]:
        """Find all categories ordered by name."""
        stmt = select(categories_table).order_by(categories_table.c.name)
        try:
            async with self.database.transaction() as session:
                result = await session.execute(stmt)
                rows = result.fetchall()
        except STORAGE_ERRORS as e:
            logfire.error(
                "Storage operation failed",
                operation="category_repository.find_all",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise PersistenceError("Cannot list categories") from e
        return [row_to_category(row._asdict()) for row in rows]

    async def find_by_id(
        self, category_id: str | UUID
    ) -> RepositoryResult[Category, GetCategoryError]:
        """Find category by ID."""
        try:
            key = parse_identifier(category_id)
            async with self.database.transaction() as session:
                stmt = select(categories_table).where(categories_table.c.id == key)
                result = await session.execute(stmt)
                row = result.fetchone()
        except STORAGE_ERRORS as e:
            return RepositoryResult.failure(
                classify_failure("category_repository.find_by_id", GetCategoryError, e)
            )

        if row is None:
            return RepositoryResult.failure(GetCategoryError.CATEGORY_NOT_FOUND)
        return RepositoryResult.success(row_to_category(row._asdict()))

    async def create(self, name: str) -> RepositoryResult[Category, CreateCategoryError]:
        """Create a category."""
        with logfire.span("category_repository.create", name=name):
            try:
                async with self.database.transaction() as session:
                    stmt = (
                        insert(categories_table)
                        .values(name=name)
                        .returning(*categories_table.c)
                    )
                    result = await session.execute(stmt)
                    row = result.one()
            except STORAGE_ERRORS as e:
                return RepositoryResult.failure(
                    classify_failure(
                        "category_repository.create", CreateCategoryError, e
                    )
                )

            category = row_to_category(row._asdict())
            logfire.info("Category created", category_id=str(category.id))
            return RepositoryResult.success(category)

    async def delete(
        self, category_id: str | UUID
    ) -> RepositoryResult[CategoryId, DeleteCategoryError]:
        """Delete a category; posts filed under it keep existing uncategorized."""
        with logfire.span("category_repository.delete", category_id=str(category_id)):
            try:
                key = parse_identifier(category_id)
                async with self.database.transaction() as session:
                    stmt = (
                        delete(categories_table)
                        .where(categories_table.c.id == key)
                        .returning(categories_table.c.id)
                    )
                    result = await session.execute(stmt)
                    deleted_id = result.scalar_one_or_none()
            except STORAGE_ERRORS as e:
                return RepositoryResult.failure(
                    classify_failure(
                        "category_repository.delete", DeleteCategoryError, e
                    )
                )

            if deleted_id is None:
                return RepositoryResult.failure(DeleteCategoryError.CATEGORY_NOT_FOUND)

            logfire.info("Category deleted", category_id=str(deleted_id))
            return RepositoryResult.success(CategoryId(deleted_id))
