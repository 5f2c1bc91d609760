"""Integration tests for SqlCategoryRepository."""

from uuid import uuid4

import pytest

from blog.domain.error import CreateCategoryError, DeleteCategoryError, GetCategoryError
from blog.domain.repository import CategoryRepository, PostRepository
from tests.harness import create_env_fixture

integration_env = create_env_fixture()


class TestCategoryRepositoryIntegration:
    @pytest.mark.asyncio
    async def test_create_and_find(self, integration_env):
        # Arrange
        repo = await integration_env.get(CategoryRepository)

        # Act
        created = await repo.create("News")
        found = await repo.find_by_id(str(created.data.id))

        # Assert
        assert created.ok
        assert found.data.name == "News"

    @pytest.mark.asyncio
    async def test_find_all_is_ordered_by_name(self, integration_env):
        repo = await integration_env.get(CategoryRepository)
        for name in ["Zeta", "Alpha", "Mid"]:
            await repo.create(name)

        categories = await repo.find_all()

        assert [c.name for c in categories] == ["Alpha", "Mid", "Zeta"]

    @pytest.mark.asyncio
    async def test_duplicate_name(self, integration_env):
        repo = await integration_env.get(CategoryRepository)
        await repo.create("News")

        result = await repo.create("News")

        assert result.error is CreateCategoryError.DUPLICATE_CATEGORY_NAME

    @pytest.mark.asyncio
    async def test_missing_and_malformed_ids(self, integration_env):
        repo = await integration_env.get(CategoryRepository)

        assert (await repo.find_by_id(str(uuid4()))).error is (
            GetCategoryError.CATEGORY_NOT_FOUND
        )
        assert (await repo.find_by_id("c1")).error is (
            GetCategoryError.CATEGORY_NOT_FOUND
        )
        assert (await repo.delete(str(uuid4()))).error is (
            DeleteCategoryError.CATEGORY_NOT_FOUND
        )

    @pytest.mark.asyncio
    async def test_delete_uncategorizes_posts(self, integration_env):
        # Arrange
        repo = await integration_env.get(CategoryRepository)
        post_repo = await integration_env.get(PostRepository)
        category = (await repo.create("News")).data
        post = (
            await post_repo.create(
                title="Filed", content="x", category_id=str(category.id)
            )
        ).data

        # Act
        deleted = await repo.delete(category.id)

        # Assert
        assert deleted.data == category.id
        fetched = await post_repo.find_by_id(post.id)
        assert fetched.ok
        assert fetched.data.category_id is None
        assert fetched.data.category is None
