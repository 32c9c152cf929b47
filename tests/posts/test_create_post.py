"""Tests for POST /api/blogs."""

from httpx import AsyncClient

from tests.factories import AuthedUser

BLOGS_URL = "/api/blogs"


class TestCreatePost:
    """Creating posts as an authenticated user."""

    async def test_defaults_to_draft_owned_by_caller(
        self,
        client: AsyncClient,
        user_a: AuthedUser,
    ) -> None:
        response = await client.post(
            BLOGS_URL,
            json={"title": "First steps", "body": "Hello world", "tags": ["intro", "misc"]},
            headers=user_a.headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "success"
        post = body["data"]
        assert post["state"] == "draft"
        assert post["author"] == str(user_a.id)
        assert post["read_count"] == 0
        assert post["reading_time"] == "1 min read"
        assert post["tags"] == ["intro", "misc"]
        assert post["description"] is None
        assert post["updated_at"] is None

    async def test_explicit_state_honoured(
        self,
        client: AsyncClient,
        user_a: AuthedUser,
    ) -> None:
        response = await client.post(
            BLOGS_URL,
            json={"title": "Ready to go", "body": "Hello world", "state": "published"},
            headers=user_a.headers,
        )

        assert response.status_code == 201
        assert response.json()["data"]["state"] == "published"

    async def test_unknown_state_rejected(
        self,
        client: AsyncClient,
        user_a: AuthedUser,
    ) -> None:
        response = await client.post(
            BLOGS_URL,
            json={"title": "Odd", "body": "Hello world", "state": "archived"},
            headers=user_a.headers,
        )

        assert response.status_code == 400
        assert response.json()["status"] == "fail"

    async def test_reading_time_from_word_count(
        self,
        client: AsyncClient,
        user_a: AuthedUser,
    ) -> None:
        """401 words at 200 words a minute round up to three minutes."""
        response = await client.post(
            BLOGS_URL,
            json={"title": "Long read", "body": " ".join(["word"] * 401)},
            headers=user_a.headers,
        )

        assert response.json()["data"]["reading_time"] == "3 min read"

    async def test_owner_field_in_payload_ignored(
        self,
        client: AsyncClient,
        user_a: AuthedUser,
        user_b: AuthedUser,
    ) -> None:
        response = await client.post(
            BLOGS_URL,
            json={"title": "Mine", "body": "Hello world", "author": str(user_b.id)},
            headers=user_a.headers,
        )

        assert response.json()["data"]["author"] == str(user_a.id)

    async def test_duplicate_title_rejected(
        self,
        client: AsyncClient,
        user_a: AuthedUser,
        user_b: AuthedUser,
    ) -> None:
        """Titles are unique across all owners."""
        first = await client.post(
            BLOGS_URL,
            json={"title": "Same title", "body": "one"},
            headers=user_a.headers,
        )
        second = await client.post(
            BLOGS_URL,
            json={"title": "Same title", "body": "two"},
            headers=user_b.headers,
        )

        assert first.status_code == 201
        assert second.status_code == 400
        assert second.json() == {
            "status": "fail",
            "message": 'Duplicate field value: "Same title". Please use another value!',
        }

    async def test_missing_body_rejected(self, client: AsyncClient, user_a: AuthedUser) -> None:
        response = await client.post(
            BLOGS_URL,
            json={"title": "No body"},
            headers=user_a.headers,
        )

        assert response.status_code == 400
        assert any(error["field"] == "body" for error in response.json()["errors"])

    async def test_requires_authentication(self, client: AsyncClient) -> None:
        response = await client.post(BLOGS_URL, json={"title": "Anon", "body": "Hello"})

        assert response.status_code == 401
