"""SQL implementation of Post repository."""

from collections import defaultdict
from collections.abc import Sequence
from typing import Any, List, Optional
from uuid import UUID, uuid4

import logfire
from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.error import (
    CreatePostError,
    DeletePostError,
    GetPostError,
    UpdatePostError,
)
from blog.domain.model import Post
from blog.domain.repository.post import PostRepository
from blog.domain.repository.result import RepositoryResult
from blog.domain.value import PostId
from blog.persistence.database import Database
from blog.persistence.error import (
    STORAGE_ERRORS,
    InvalidIdentifierError,
    PersistenceError,
    classify_failure,
)
from blog.persistence.mappers import parse_identifier, row_to_post
from blog.persistence.tables import (
    categories_table,
    post_tags_table,
    posts_table,
    tags_table,
)
from blog.util.text import normalize_title, slugify

# Every post column except the normalized title, which is never returned
_POST_COLUMNS = [c for c in posts_table.c if c.name != "normalized_title"]


def _slug_for(title: str, post_id: UUID) -> str:
    """Slug for a title, falling back to the post id for symbol-only titles."""
    return slugify(title) or f"post-{post_id.hex[:8]}"


def _known_tag_ids(tag_ids: Sequence[str | UUID]) -> list[UUID]:
    """Parse tag ids, dropping malformed ones and duplicates."""
    parsed: dict[UUID, None] = {}
    for tag_id in tag_ids:
        try:
            key = parse_identifier(tag_id)
        except InvalidIdentifierError:
            logfire.debug("Dropping malformed tag id", tag_id=str(tag_id))
            continue
        parsed.setdefault(key)
    return list(parsed)


class SqlPostRepository(PostRepository):
    """SQL implementation of PostRepository (PostgreSQL, SQLite in tests)."""

    def __init__(self, database: Database) -> None:
        """Initialize repository with the storage gateway.

        Args:
            database: Storage gateway providing transactions
        """
        self.database = database

    async def _fetch_tags_for_posts(
        self, session: AsyncSession, post_ids: list[UUID]
    ) -> dict[UUID, list[str]]:
        """Fetch tags for multiple posts in a single query.

        Args:
            session: Session of the running transaction
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> list of tag names
        """
        if not post_ids:
            return {}

        stmt = (
            select(post_tags_table.c.post_id, tags_table.c.name)
            .select_from(post_tags_table)
            .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
            .where(post_tags_table.c.post_id.in_(post_ids))
            .order_by(tags_table.c.name)
        )
        result = await session.execute(stmt)

        # Build lookup: post_id -> [tag_names]
        post_tag_map: dict[UUID, list[str]] = defaultdict(list)
        for row in result.fetchall():
            post_tag_map[row.post_id].append(row.name)

        return post_tag_map

    async def _fetch_category_name(
        self, session: AsyncSession, category_id: UUID
    ) -> Optional[str]:
        stmt = select(categories_table.c.name).where(
            categories_table.c.id == category_id
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def _associate_tags(
        self,
        session: AsyncSession,
        post_id: UUID,
        tag_ids: Sequence[str | UUID],
    ) -> list[str]:
        """Link the existing tags among ``tag_ids`` to a post.

        Unknown or malformed ids are dropped, not reported.

        Returns:
            Names of the tags that were associated
        """
        candidates = _known_tag_ids(tag_ids)
        if not candidates:
            return []

        stmt = (
            select(tags_table.c.id, tags_table.c.name)
            .where(tags_table.c.id.in_(candidates))
            .order_by(tags_table.c.name)
        )
        result = await session.execute(stmt)
        tag_rows = result.fetchall()

        if len(tag_rows) < len(candidates):
            logfire.info(
                "Dropping unknown tag ids",
                post_id=str(post_id),
                requested=len(candidates),
                found=len(tag_rows),
            )

        if tag_rows:
            await session.execute(
                insert(post_tags_table),
                [{"post_id": post_id, "tag_id": row.id} for row in tag_rows],
            )

        return [row.name for row in tag_rows]

    def _select_posts(self):
        return select(
            *_POST_COLUMNS, categories_table.c.name.label("category")
        ).select_from(
            posts_table.outerjoin(
                categories_table, posts_table.c.category_id == categories_table.c.id
            )
        )

    async def find_all(self) -> List[Post]:
        """List all posts with category and tag names."""
        with logfire.span("post_repository.find_all"):
            try:
                async with self.database.transaction() as session:
                    result = await session.execute(self._select_posts())
                    post_rows = result.fetchall()

                    # Fetch tags for all posts in a single query
                    post_tag_map = await self._fetch_tags_for_posts(
                        session, [row.id for row in post_rows]
                    )
            except STORAGE_ERRORS as e:
                logfire.error(
                    "Storage operation failed",
                    operation="post_repository.find_all",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise PersistenceError("Cannot list posts") from e

            posts = [
                row_to_post(
                    row._asdict(),
                    category=row.category,
                    tag_names=post_tag_map.get(row.id, []),
                )
                for row in post_rows
            ]
            logfire.info("Found posts", count=len(posts))
            return posts

    async def find_by_id(
        self, post_id: str | UUID
    ) -> RepositoryResult[Post, GetPostError]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            try:
                key = parse_identifier(post_id)
                async with self.database.transaction() as session:
                    stmt = self._select_posts().where(posts_table.c.id == key).limit(1)
                    result = await session.execute(stmt)
                    row = result.fetchone()

                    if row is None:
                        logfire.warn("Post not found", post_id=str(post_id))
                        return RepositoryResult.failure(GetPostError.POST_NOT_FOUND)

                    post_tag_map = await self._fetch_tags_for_posts(session, [key])
            except STORAGE_ERRORS as e:
                return RepositoryResult.failure(
                    classify_failure("post_repository.find_by_id", GetPostError, e)
                )

            return RepositoryResult.success(
                row_to_post(
                    row._asdict(),
                    category=row.category,
                    tag_names=post_tag_map.get(key, []),
                )
            )

    async def create(
        self,
        title: str,
        content: str,
        category_id: Optional[str | UUID] = None,
        published: Optional[bool] = None,
        tag_ids: Sequence[str | UUID] = (),
    ) -> RepositoryResult[Post, CreatePostError]:
        """Create a post, its category link and its tag associations."""
        with logfire.span(
            "post_repository.create",
            title=title,
            category_id=str(category_id) if category_id is not None else None,
            tag_count=len(tag_ids),
        ):
            post_id = uuid4()
            values: dict[str, Any] = {
                "id": post_id,
                "title": title,
                "normalized_title": normalize_title(title),
                "slug": _slug_for(title, post_id),
                "content": content,
            }
            if published is not None:
                values["published"] = published

            try:
                if category_id is not None:
                    values["category_id"] = parse_identifier(category_id)

                async with self.database.transaction() as session:
                    stmt = insert(posts_table).values(**values).returning(*_POST_COLUMNS)
                    result = await session.execute(stmt)
                    row = result.one()

                    if row.category_id:
                        category = await self._fetch_category_name(
                            session, row.category_id
                        )
                        tag_names: list[str] = []
                        if tag_ids:
                            # Posts created with a category never get tags in
                            # the same call
                            logfire.warn(
                                "Tag ids ignored for post created with a category",
                                post_id=str(post_id),
                                tag_count=len(tag_ids),
                            )
                    else:
                        category = None
                        tag_names = await self._associate_tags(
                            session, row.id, tag_ids
                        )
            except STORAGE_ERRORS as e:
                return RepositoryResult.failure(
                    classify_failure("post_repository.create", CreatePostError, e)
                )

            post = row_to_post(
                row._asdict(), category=category, tag_names=tag_names
            )
            logfire.info("Post created", post_id=str(post.id), slug=str(post.slug))
            return RepositoryResult.success(post)

    async def update(
        self,
        post_id: str | UUID,
        title: str,
        content: str,
        category_id: Optional[str | UUID],
        published: Optional[bool],
        tag_ids: Optional[Sequence[str | UUID]] = None,
    ) -> RepositoryResult[Post, UpdatePostError]:
        """Update a post, replacing its tag set when one is given."""
        with logfire.span(
            "post_repository.update",
            post_id=str(post_id),
            title=title,
            replaces_tags=tag_ids is not None,
        ):
            try:
                key = parse_identifier(post_id)
            except InvalidIdentifierError:
                logfire.warn("Cannot update post with malformed id", post_id=str(post_id))
                return RepositoryResult.failure(UpdatePostError.CANNOT_UPDATE_POST)

            values: dict[str, Any] = {
                "title": title,
                "normalized_title": normalize_title(title),
                "slug": _slug_for(title, key),
                "content": content,
            }
            if published is not None:
                values["published"] = published

            try:
                values["category_id"] = (
                    parse_identifier(category_id) if category_id is not None else None
                )

                async with self.database.transaction() as session:
                    stmt = (
                        update(posts_table)
                        .where(posts_table.c.id == key)
                        .values(**values)
                        .returning(*_POST_COLUMNS)
                    )
                    result = await session.execute(stmt)
                    row = result.fetchone()

                    if row is None:
                        logfire.warn("No post matched update", post_id=str(post_id))
                        return RepositoryResult.failure(
                            UpdatePostError.CANNOT_UPDATE_POST
                        )

                    if tag_ids is not None:
                        # Replace the whole association set
                        await session.execute(
                            delete(post_tags_table).where(
                                post_tags_table.c.post_id == key
                            )
                        )
                        tag_names = await self._associate_tags(session, key, tag_ids)
                    else:
                        post_tag_map = await self._fetch_tags_for_posts(session, [key])
                        tag_names = post_tag_map.get(key, [])

                    category = (
                        await self._fetch_category_name(session, row.category_id)
                        if row.category_id
                        else None
                    )
            except STORAGE_ERRORS as e:
                return RepositoryResult.failure(
                    classify_failure("post_repository.update", UpdatePostError, e)
                )

            post = row_to_post(
                row._asdict(), category=category, tag_names=tag_names
            )
            logfire.info("Post updated", post_id=str(post.id), tag_count=len(tag_names))
            return RepositoryResult.success(post)

    async def delete(
        self, post_id: str | UUID
    ) -> RepositoryResult[PostId, DeletePostError]:
        """Delete a post (hard delete) with its tag associations."""
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            try:
                key = parse_identifier(post_id)
                async with self.database.transaction() as session:
                    await session.execute(
                        delete(post_tags_table).where(post_tags_table.c.post_id == key)
                    )
                    stmt = (
                        delete(posts_table)
                        .where(posts_table.c.id == key)
                        .returning(posts_table.c.id)
                    )
                    result = await session.execute(stmt)
                    deleted_id = result.scalar_one_or_none()
            except STORAGE_ERRORS as e:
                return RepositoryResult.failure(
                    classify_failure("post_repository.delete", DeletePostError, e)
                )

            if deleted_id is None:
                logfire.warn("Post not found for delete", post_id=str(post_id))
                return RepositoryResult.failure(DeletePostError.POST_NOT_FOUND)

            logfire.info("Post deleted", post_id=str(deleted_id))
            return RepositoryResult.success(PostId(deleted_id))
