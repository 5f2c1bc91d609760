"""Integration tests for SqlPostRepository.

Run against a fresh in-memory SQLite database with foreign keys enforced.
"""

from uuid import UUID, uuid4

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from blog.domain.error import (
    CreatePostError,
    DeletePostError,
    GetPostError,
    UpdatePostError,
)
from blog.domain.repository import CategoryRepository, PostRepository, TagRepository
from blog.persistence.database import Database
from blog.persistence.repository import SqlPostRepository
from blog.persistence.tables import post_tags_table, posts_table
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture()


async def count_associations(database: Database, post_id: UUID) -> int:
    async with database.transaction() as session:
        result = await session.execute(
            select(func.count())
            .select_from(post_tags_table)
            .where(post_tags_table.c.post_id == post_id)
        )
        return result.scalar_one()


async def count_posts(database: Database) -> int:
    async with database.transaction() as session:
        result = await session.execute(select(func.count()).select_from(posts_table))
        return result.scalar_one()


async def create_tags(env, *names: str) -> list[str]:
    """Create tags and return their ids."""
    tag_repo = await env.get(TagRepository)
    ids = []
    for name in names:
        result = await tag_repo.create(name)
        assert result.ok
        ids.append(str(result.data.id))
    return ids


async def create_category(env, name: str) -> str:
    category_repo = await env.get(CategoryRepository)
    result = await category_repo.create(name)
    assert result.ok
    return str(result.data.id)


class TestCreatePost:
    """Tests for SqlPostRepository.create."""

    @pytest.mark.asyncio
    async def test_create_without_category_resolves_tag_names(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        t1, t2 = await create_tags(integration_env, "tag-one", "tag-two")

        # Act
        result = await post_repo.create(
            title="Hello World", content="hi", tag_ids=[t1, t2]
        )

        # Assert
        assert result.ok
        post = result.data
        assert post.title == "Hello World"
        assert str(post.slug) == "hello-world"
        assert post.category is None
        assert post.category_id is None
        assert sorted(post.tags) == ["tag-one", "tag-two"]

    @pytest.mark.asyncio
    async def test_published_defaults_to_false(self, integration_env):
        post_repo = await integration_env.get(PostRepository)

        draft = await post_repo.create(title="Draft", content="...")
        live = await post_repo.create(title="Live", content="...", published=True)

        assert draft.data.published is False
        assert live.data.published is True

    @pytest.mark.asyncio
    async def test_symbol_only_title_gets_fallback_slug(self, integration_env):
        post_repo = await integration_env.get(PostRepository)

        result = await post_repo.create(title="!!! ???", content="symbols")

        assert result.ok
        assert str(result.data.slug) == f"post-{result.data.id.hex[:8]}"

    @pytest.mark.asyncio
    async def test_duplicate_title_is_rejected(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        database = await integration_env.get(Database)
        first = await post_repo.create(title="Hello World", content="hi")
        assert first.ok

        # Act
        second = await post_repo.create(title="Hello World", content="again")

        # Assert
        assert second.error is CreatePostError.DUPLICATE_POST_TITLE
        assert await count_posts(database) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "variant", ["hello world", "  HELLO   World ", "Héllo Wörld", "Hello\tWorld"]
    )
    async def test_titles_with_same_normalized_form_collide(
        self, integration_env, variant
    ):
        post_repo = await integration_env.get(PostRepository)
        assert (await post_repo.create(title="Hello World", content="hi")).ok

        result = await post_repo.create(title=variant, content="hi")

        assert result.error is CreatePostError.DUPLICATE_POST_TITLE

    @pytest.mark.asyncio
    async def test_unknown_category_leaves_no_row(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        database = await integration_env.get(Database)
        t1 = (await create_tags(integration_env, "tag-one"))[0]

        # Act
        result = await post_repo.create(
            title="Orphan", content="hi", category_id=str(uuid4()), tag_ids=[t1]
        )

        # Assert
        assert result.error is CreatePostError.CATEGORY_NOT_FOUND
        assert await count_posts(database) == 0

    @pytest.mark.asyncio
    async def test_malformed_category_id_is_category_not_found(self, integration_env):
        post_repo = await integration_env.get(PostRepository)

        result = await post_repo.create(title="Orphan", content="hi", category_id="c1")

        assert result.error is CreatePostError.CATEGORY_NOT_FOUND

    @pytest.mark.asyncio
    async def test_create_with_category_resolves_name_and_skips_tags(
        self, integration_env
    ):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        database = await integration_env.get(Database)
        category_id = await create_category(integration_env, "News")
        t1 = (await create_tags(integration_env, "tag-one"))[0]

        # Act
        result = await post_repo.create(
            title="Filed", content="hi", category_id=category_id, tag_ids=[t1]
        )

        # Assert
        assert result.ok
        assert result.data.category == "News"
        assert str(result.data.category_id) == category_id
        # Tag ids are not associated when a category is given
        assert result.data.tags == []
        assert await count_associations(database, result.data.id) == 0

    @pytest.mark.asyncio
    async def test_unknown_and_malformed_tag_ids_are_dropped(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        t1 = (await create_tags(integration_env, "tag-one"))[0]

        result = await post_repo.create(
            title="Tags", content="hi", tag_ids=[t1, str(uuid4()), "garbage", t1]
        )

        assert result.ok
        assert result.data.tags == ["tag-one"]


class TestFindPost:
    """Tests for SqlPostRepository.find_by_id and find_all."""

    @pytest.mark.asyncio
    async def test_find_by_id_returns_category_and_tags(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        category_id = await create_category(integration_env, "News")
        t1, t2 = await create_tags(integration_env, "b-tag", "a-tag")
        created = await post_repo.create(title="Hello", content="hi", tag_ids=[t1, t2])
        await post_repo.update(
            created.data.id, "Hello", "hi", category_id, None, tag_ids=None
        )

        # Act
        result = await post_repo.find_by_id(str(created.data.id))

        # Assert
        assert result.ok
        assert result.data.category == "News"
        assert sorted(result.data.tags) == ["a-tag", "b-tag"]

    @pytest.mark.asyncio
    async def test_not_found_is_stable(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        missing = str(uuid4())

        for _ in range(2):
            assert (await post_repo.find_by_id(missing)).error is (
                GetPostError.POST_NOT_FOUND
            )

    @pytest.mark.asyncio
    async def test_malformed_id_is_not_found(self, integration_env):
        post_repo = await integration_env.get(PostRepository)

        result = await post_repo.find_by_id("t1")

        assert result.error is GetPostError.POST_NOT_FOUND

    @pytest.mark.asyncio
    async def test_find_all_lists_every_post(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        category_id = await create_category(integration_env, "News")
        (t1,) = await create_tags(integration_env, "tag-one")
        await post_repo.create(title="First", content="1", tag_ids=[t1])
        await post_repo.create(title="Second", content="2", category_id=category_id)

        # Act
        posts = await post_repo.find_all()

        # Assert
        by_title = {post.title: post for post in posts}
        assert set(by_title) == {"First", "Second"}
        assert by_title["First"].tags == ["tag-one"]
        assert by_title["First"].category is None
        assert by_title["Second"].category == "News"
        assert by_title["Second"].tags == []

    @pytest.mark.asyncio
    async def test_find_all_on_empty_store(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        assert await post_repo.find_all() == []


class TestUpdatePost:
    """Tests for SqlPostRepository.update."""

    @pytest.mark.asyncio
    async def test_hello_world_scenario_clears_tags(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        t1, t2 = await create_tags(integration_env, "tag-one", "tag-two")
        created = await post_repo.create(
            title="Hello World", content="hi", tag_ids=[t1, t2]
        )
        assert sorted(created.data.tags) == ["tag-one", "tag-two"]

        # Act
        updated = await post_repo.update(
            created.data.id, "Hello World", "hi", None, None, tag_ids=[]
        )

        # Assert
        assert updated.ok
        assert updated.data.tags == []
        fetched = await post_repo.find_by_id(created.data.id)
        assert fetched.data.tags == []

    @pytest.mark.asyncio
    async def test_replacing_with_same_set_twice_keeps_one_row_per_tag(
        self, integration_env
    ):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        database = await integration_env.get(Database)
        t1, t2, t3 = await create_tags(integration_env, "a", "b", "c")
        created = await post_repo.create(title="Post", content="x", tag_ids=[t1])
        post_id = created.data.id

        # Act
        for _ in range(2):
            result = await post_repo.update(
                post_id, "Post", "x", None, None, tag_ids=[t2, t3]
            )
            assert result.ok

        # Assert
        assert await count_associations(database, post_id) == 2
        fetched = await post_repo.find_by_id(post_id)
        assert sorted(fetched.data.tags) == ["b", "c"]

    @pytest.mark.asyncio
    async def test_omitted_tags_are_left_alone(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        (t1,) = await create_tags(integration_env, "keep")
        created = await post_repo.create(title="Post", content="x", tag_ids=[t1])

        result = await post_repo.update(
            created.data.id, "Post v2", "y", None, None, tag_ids=None
        )

        assert result.ok
        assert result.data.tags == ["keep"]
        assert str(result.data.slug) == "post-v2"

    @pytest.mark.asyncio
    async def test_published_none_keeps_stored_value(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        created = await post_repo.create(title="Post", content="x", published=True)

        result = await post_repo.update(created.data.id, "Post", "y", None, None)

        assert result.data.published is True

    @pytest.mark.asyncio
    async def test_category_is_set_and_cleared(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        category_id = await create_category(integration_env, "News")
        created = await post_repo.create(title="Post", content="x")

        # Act
        filed = await post_repo.update(created.data.id, "Post", "x", category_id, None)
        cleared = await post_repo.update(created.data.id, "Post", "x", None, None)

        # Assert
        assert filed.data.category == "News"
        assert cleared.data.category is None
        assert cleared.data.category_id is None

    @pytest.mark.asyncio
    async def test_update_with_category_returns_new_tags(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        category_id = await create_category(integration_env, "News")
        (t1,) = await create_tags(integration_env, "x")
        created = await post_repo.create(title="Post", content="x")

        # Act
        result = await post_repo.update(
            created.data.id, "Post", "x", category_id, None, tag_ids=[t1]
        )

        # Assert
        assert result.ok
        assert result.data.category == "News"
        assert result.data.tags == ["x"]

    @pytest.mark.asyncio
    async def test_repeated_tag_ids_make_one_association(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        database = await integration_env.get(Database)
        (t1,) = await create_tags(integration_env, "x")
        created = await post_repo.create(title="Post", content="x")

        result = await post_repo.update(
            created.data.id, "Post", "x", None, None, tag_ids=[t1, t1, t1.upper()]
        )

        assert result.data.tags == ["x"]
        assert await count_associations(database, created.data.id) == 1

    @pytest.mark.asyncio
    async def test_failed_tag_replacement_rolls_back_whole_update(
        self, integration_env, monkeypatch
    ):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        database = await integration_env.get(Database)
        t1, t2 = await create_tags(integration_env, "old", "new")
        created = await post_repo.create(title="Post", content="x", tag_ids=[t1])

        async def failing_associate(self, session, post_id, tag_ids):
            raise OperationalError(
                "INSERT INTO post_tags", {}, Exception("disk I/O error")
            )

        monkeypatch.setattr(SqlPostRepository, "_associate_tags", failing_associate)

        # Act
        result = await post_repo.update(
            created.data.id, "Renamed", "y", None, None, tag_ids=[t2]
        )

        # Assert
        assert result.error is UpdatePostError.CANNOT_UPDATE_POST
        assert await count_associations(database, created.data.id) == 1
        fetched = await post_repo.find_by_id(created.data.id)
        assert fetched.data.title == "Post"
        assert fetched.data.tags == ["old"]

    @pytest.mark.asyncio
    async def test_unknown_category_leaves_post_unchanged(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        (t1,) = await create_tags(integration_env, "keep")
        created = await post_repo.create(title="Post", content="x", tag_ids=[t1])

        # Act
        result = await post_repo.update(
            created.data.id, "Renamed", "y", str(uuid4()), None, tag_ids=[]
        )

        # Assert
        assert result.error is UpdatePostError.CATEGORY_NOT_FOUND
        fetched = await post_repo.find_by_id(created.data.id)
        assert fetched.data.title == "Post"
        assert fetched.data.tags == ["keep"]

    @pytest.mark.asyncio
    async def test_duplicate_title_is_rejected(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        await post_repo.create(title="Taken", content="x")
        created = await post_repo.create(title="Free", content="x")

        result = await post_repo.update(created.data.id, "  TAKEN ", "x", None, None)

        assert result.error is UpdatePostError.DUPLICATE_POST_TITLE

    @pytest.mark.asyncio
    async def test_missing_or_malformed_post_cannot_be_updated(self, integration_env):
        post_repo = await integration_env.get(PostRepository)

        missing = await post_repo.update(str(uuid4()), "T", "x", None, None)
        malformed = await post_repo.update("p1", "T", "x", None, None)

        assert missing.error is UpdatePostError.CANNOT_UPDATE_POST
        assert malformed.error is UpdatePostError.CANNOT_UPDATE_POST


class TestDeletePost:
    """Tests for SqlPostRepository.delete."""

    @pytest.mark.asyncio
    async def test_delete_removes_post_and_associations(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        database = await integration_env.get(Database)
        t1, t2 = await create_tags(integration_env, "a", "b")
        created = await post_repo.create(title="Post", content="x", tag_ids=[t1, t2])
        post_id = created.data.id
        assert await count_associations(database, post_id) == 2

        # Act
        result = await post_repo.delete(str(post_id))

        # Assert
        assert result.ok
        assert result.data == post_id
        assert await count_associations(database, post_id) == 0
        assert (await post_repo.find_by_id(post_id)).error is (
            GetPostError.POST_NOT_FOUND
        )

    @pytest.mark.asyncio
    async def test_delete_never_existing_post_is_not_found(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        missing = str(uuid4())

        for _ in range(2):
            assert (await post_repo.delete(missing)).error is (
                DeletePostError.POST_NOT_FOUND
            )
        assert (await post_repo.delete("t1")).error is DeletePostError.POST_NOT_FOUND

    @pytest.mark.asyncio
    async def test_delete_keeps_tags(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        tag_repo = await integration_env.get(TagRepository)
        (t1,) = await create_tags(integration_env, "survivor")
        created = await post_repo.create(title="Post", content="x", tag_ids=[t1])

        await post_repo.delete(created.data.id)

        assert (await tag_repo.find_by_id(t1)).ok
