"""Tests for GET /api/blogs/me, the owner's own listing."""

from datetime import datetime

from httpx import AsyncClient

from tests.factories import AuthedUser

ME_URL = "/api/blogs/me"


class TestOwnerListing:
    """The caller sees all of their posts, drafts included, and nobody else's."""

    async def test_lists_drafts_and_published(
        self,
        client: AsyncClient,
        user_a: AuthedUser,
        user_b: AuthedUser,
        create_post,
    ) -> None:
        await create_post(user_a, title="Ada draft")
        await create_post(user_a, title="Ada live", state="published")
        await create_post(user_b, title="Grace live", state="published")

        response = await client.get(ME_URL, headers=user_a.headers)

        assert response.status_code == 200
        body = response.json()
        assert sorted(post["title"] for post in body["data"]) == ["Ada draft", "Ada live"]
        assert body["total"] == 2
        assert all(post["author"] == str(user_a.id) for post in body["data"])

    async def test_state_filter(
        self,
        client: AsyncClient,
        user_a: AuthedUser,
        create_post,
    ) -> None:
        await create_post(user_a, title="Draft one")
        await create_post(user_a, title="Draft two")
        await create_post(user_a, title="Live", state="published")

        drafts = await client.get(ME_URL, params={"state": "draft"}, headers=user_a.headers)
        published = await client.get(
            ME_URL,
            params={"state": "published"},
            headers=user_a.headers,
        )
        bogus = await client.get(ME_URL, params={"state": "archived"}, headers=user_a.headers)

        assert {post["state"] for post in drafts.json()["data"]} == {"draft"}
        assert drafts.json()["total"] == 2
        assert [post["title"] for post in published.json()["data"]] == ["Live"]
        assert bogus.json()["total"] == 3

    async def test_newest_first(
        self,
        client: AsyncClient,
        user_a: AuthedUser,
        create_post,
    ) -> None:
        for title in ("First", "Second", "Third"):
            await create_post(user_a, title=title)

        response = await client.get(ME_URL, headers=user_a.headers)

        stamps = [datetime.fromisoformat(post["timestamp"]) for post in response.json()["data"]]
        assert stamps == sorted(stamps, reverse=True)

    async def test_pagination(
        self,
        client: AsyncClient,
        user_a: AuthedUser,
        create_post,
    ) -> None:
        for index in range(3):
            await create_post(user_a, title=f"Post {index}")

        response = await client.get(ME_URL, params={"page": 2, "limit": 2}, headers=user_a.headers)

        body = response.json()
        assert len(body["data"]) == 1
        assert body["page"] == 2
        assert body["limit"] == 2
        assert body["total"] == 3

    async def test_listing_does_not_count_reads(
        self,
        client: AsyncClient,
        user_a: AuthedUser,
        create_post,
    ) -> None:
        await create_post(user_a, title="Untouched", state="published")

        await client.get(ME_URL, headers=user_a.headers)
        response = await client.get(ME_URL, headers=user_a.headers)

        assert response.json()["data"][0]["read_count"] == 0

    async def test_requires_authentication(self, client: AsyncClient) -> None:
        response = await client.get(ME_URL)

        assert response.status_code == 401
