"""End-to-end walk through the draft, permission and publish flow."""

from httpx import AsyncClient

from tests.factories import AuthedUser


class TestOwnershipScenario:
    """Two users, one post, owner-only mutation and public reads."""

    async def test_draft_forbidden_publish_then_read(
        self,
        client: AsyncClient,
        user_a: AuthedUser,
        user_b: AuthedUser,
    ) -> None:
        created = await client.post(
            "/api/blogs",
            json={"title": "P", "body": "A post written by user A."},
            headers=user_a.headers,
        )
        assert created.status_code == 201
        post = created.json()["data"]
        assert post["state"] == "draft"
        assert post["read_count"] == 0
        post_url = f"/api/blogs/{post['id']}"

        forbidden = await client.patch(
            post_url,
            json={"state": "published"},
            headers=user_b.headers,
        )
        assert forbidden.status_code == 403

        published = await client.patch(
            post_url,
            json={"state": "published"},
            headers=user_a.headers,
        )
        assert published.status_code == 200
        assert published.json()["data"]["state"] == "published"
        assert published.json()["data"]["read_count"] == 0

        read = await client.get(post_url)
        assert read.status_code == 200
        assert read.json()["read_count"] == 1
        assert read.json()["data"]["state"] == "published"
        assert read.json()["data"]["author"]["id"] == str(user_a.id)
