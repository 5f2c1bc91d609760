"""SQL implementation of Tag repository."""

from uuid import UUID

import logfire
from sqlalchemy import delete, insert, select

from blog.domain.error import CreateTagError, DeleteTagError, GetTagError
from blog.domain.model.tag import Tag
from blog.domain.repository.result import RepositoryResult
from blog.domain.repository.tag import TagRepository
from blog.domain.value import TagId
from blog.persistence.database import Database
from blog.persistence.error import STORAGE_ERRORS, PersistenceError, classify_failure
from blog.persistence.mappers import parse_identifier, row_to_tag
from blog.persistence.tables import post_tags_table, tags_table


class SqlTagRepository(TagRepository):
    """SQL implementation of TagRepository."""

    def __init__(self, database: Database) -> None:
        """Initialize repository with the storage gateway.

        Args:
            database: Storage gateway providing transactions
        """
        self.database = database

    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        stmt = select(tags_table).order_by(tags_table.c.name)
        try:
            async with self.database.transaction() as session:
                result = await session.execute(stmt)
                rows = result.fetchall()
        except STORAGE_ERRORS as e:
            logfire.error(
                "Storage operation failed",
                operation="tag_repository.find_all",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise PersistenceError("Cannot list tags") from e
        return [row_to_tag(row._asdict()) for row in rows]

    async def find_by_id(self, tag_id: str | UUID) -> RepositoryResult[Tag, GetTagError]:
        """Find tag by ID."""
        try:
            key = parse_identifier(tag_id)
            async with self.database.transaction() as session:
                stmt = select(tags_table).where(tags_table.c.id == key)
                result = await session.execute(stmt)
                row = result.fetchone()
        except STORAGE_ERRORS as e:
            return RepositoryResult.failure(
                classify_failure("tag_repository.find_by_id", GetTagError, e)
            )

        if row is None:
            return RepositoryResult.failure(GetTagError.TAG_NOT_FOUND)
        return RepositoryResult.success(row_to_tag(row._asdict()))

    async def create(self, name: str) -> RepositoryResult[Tag, CreateTagError]:
        """Create a tag."""
        with logfire.span("tag_repository.create", name=name):
            try:
                async with self.database.transaction() as session:
                    stmt = insert(tags_table).values(name=name).returning(*tags_table.c)
                    result = await session.execute(stmt)
                    row = result.one()
            except STORAGE_ERRORS as e:
                return RepositoryResult.failure(
                    classify_failure("tag_repository.create", CreateTagError, e)
                )

            tag = row_to_tag(row._asdict())
            logfire.info("Tag created", tag_id=str(tag.id))
            return RepositoryResult.success(tag)

    async def delete(self, tag_id: str | UUID) -> RepositoryResult[TagId, DeleteTagError]:
        """Delete a tag and its associations with posts."""
        with logfire.span("tag_repository.delete", tag_id=str(tag_id)):
            try:
                key = parse_identifier(tag_id)
                async with self.database.transaction() as session:
                    await session.execute(
                        delete(post_tags_table).where(post_tags_table.c.tag_id == key)
                    )
                    stmt = (
                        delete(tags_table)
                        .where(tags_table.c.id == key)
                        .returning(tags_table.c.id)
                    )
                    result = await session.execute(stmt)
                    deleted_id = result.scalar_one_or_none()
            except STORAGE_ERRORS as e:
                return RepositoryResult.failure(
                    classify_failure("tag_repository.delete", DeleteTagError, e)
                )

            if deleted_id is None:
                return RepositoryResult.failure(DeleteTagError.TAG_NOT_FOUND)

            logfire.info("Tag deleted", tag_id=str(deleted_id))
            return RepositoryResult.success(TagId(deleted_id))
