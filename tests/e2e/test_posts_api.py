"""End-to-end tests for the post routes."""

from uuid import uuid4

import pytest

from tests.harness import create_client_fixture

client = create_client_fixture()


async def create_tag(client, name: str) -> str:
    response = await client.post("/tags", json={"name": name})
    assert response.status_code == 201
    return response.json()["tag"]["id"]


async def create_category(client, name: str) -> str:
    response = await client.post("/categories", json={"name": name})
    assert response.status_code == 201
    return response.json()["category"]["id"]


class TestPostsAPI:
    @pytest.mark.asyncio
    async def test_create_get_update_delete(self, client):
        # Arrange
        t1 = await create_tag(client, "tag-one")
        t2 = await create_tag(client, "tag-two")

        # Act: create
        response = await client.post(
            "/posts",
            json={"title": "Hello World", "content": "hi", "tag_ids": [t1, t2]},
        )

        # Assert
        assert response.status_code == 201
        post = response.json()["post"]
        assert post["category"] is None
        assert post["published"] is False
        assert post["slug"] == "hello-world"
        assert sorted(post["tags"]) == ["tag-one", "tag-two"]

        # Act: clear the tags
        response = await client.put(f"/posts/{post['id']}", json={"tag_ids": []})
        assert response.status_code == 200
        assert response.json()["post"]["title"] == "Hello World"

        response = await client.get(f"/posts/{post['id']}")
        assert response.status_code == 200
        assert response.json()["post"]["tags"] == []

        # Act: delete
        response = await client.delete(f"/posts/{post['id']}")
        assert response.status_code == 204

        response = await client.get(f"/posts/{post['id']}")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_list_posts(self, client):
        await client.post("/posts", json={"title": "One", "content": "1"})
        await client.post("/posts", json={"title": "Two", "content": "2"})

        response = await client.get("/posts")

        assert response.status_code == 200
        titles = {post["title"] for post in response.json()["posts"]}
        assert titles == {"One", "Two"}

    @pytest.mark.asyncio
    async def test_duplicate_title_is_conflict(self, client):
        await client.post("/posts", json={"title": "Hello World", "content": "hi"})

        response = await client.post(
            "/posts", json={"title": "hello   WORLD", "content": "again"}
        )

        assert response.status_code == 409
        body = response.json()
        assert body["status"] == 409
        assert body["title"] == "Duplicate post title"
        assert body["detail"]

        listed = await client.get("/posts")
        assert len(listed.json()["posts"]) == 1

    @pytest.mark.asyncio
    async def test_unknown_category_is_not_found(self, client):
        response = await client.post(
            "/posts",
            json={"title": "Orphan", "content": "x", "category_id": str(uuid4())},
        )

        assert response.status_code == 404
        assert response.json()["title"] == "Category not found"

    @pytest.mark.asyncio
    async def test_update_can_clear_category(self, client):
        # Arrange
        category_id = await create_category(client, "News")
        created = await client.post("/posts", json={"title": "Post", "content": "x"})
        post_id = created.json()["post"]["id"]
        filed = await client.put(f"/posts/{post_id}", json={"category_id": category_id})
        assert filed.json()["post"]["category"] == "News"

        # Act
        response = await client.put(f"/posts/{post_id}", json={"category_id": None})

        # Assert
        assert response.status_code == 200
        assert response.json()["post"]["category"] is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("post_id", [str(uuid4()), "not-a-uuid"])
    async def test_missing_post_is_not_found(self, client, post_id):
        assert (await client.get(f"/posts/{post_id}")).status_code == 404
        assert (await client.delete(f"/posts/{post_id}")).status_code == 404
        response = await client.put(f"/posts/{post_id}", json={"title": "x"})
        assert response.status_code == 404
