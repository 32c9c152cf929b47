"""Tests for the mandatory and optional bearer token guards."""

from datetime import timedelta
from uuid import uuid4

from httpx import AsyncClient

from blog_api.managers.token_manager import create_access_token
from tests.factories import AuthedUser

ME_URL = "/api/blogs/me"


class TestMandatoryGuard:
    """Protected routes reject every kind of bad credential with 401."""

    async def test_missing_token(self, client: AsyncClient) -> None:
        response = await client.get(ME_URL)

        assert response.status_code == 401
        assert response.json() == {"status": "fail", "message": "Not authorized, no token"}

    async def test_non_bearer_scheme_treated_as_missing(self, client: AsyncClient) -> None:
        response = await client.get(ME_URL, headers={"Authorization": "Basic YWRhOnB3"})

        assert response.status_code == 401
        assert response.json()["message"] == "Not authorized, no token"

    async def test_malformed_token(self, client: AsyncClient) -> None:
        response = await client.get(ME_URL, headers={"Authorization": "Bearer not.a.jwt"})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid token. Please login again!"

    async def test_expired_token(self, client: AsyncClient, user_a: AuthedUser) -> None:
        token = create_access_token(
            user_id=user_a.id,
            email=user_a.email,
            expires_delta=timedelta(seconds=-1),
        )

        response = await client.get(ME_URL, headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["message"] == "Your token has expired! Please login again."

    async def test_token_for_missing_user(self, client: AsyncClient) -> None:
        token = create_access_token(user_id=uuid4(), email="ghost@example.com")

        response = await client.get(ME_URL, headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["message"] == "User no longer exists"

    async def test_valid_token(self, client: AsyncClient, user_a: AuthedUser) -> None:
        response = await client.get(ME_URL, headers=user_a.headers)

        assert response.status_code == 200


class TestOptionalGuard:
    """Single post retrieval degrades to anonymous on any credential failure."""

    async def test_bad_tokens_do_not_block_reads(
        self,
        client: AsyncClient,
        user_a: AuthedUser,
        create_post,
    ) -> None:
        post = await create_post(user_a, title="Open to all", state="published")
        expired = create_access_token(
            user_id=user_a.id,
            email=user_a.email,
            expires_delta=timedelta(seconds=-1),
        )
        ghost = create_access_token(user_id=uuid4(), email="ghost@example.com")

        for headers in (
            {},
            {"Authorization": "Bearer garbage"},
            {"Authorization": f"Bearer {expired}"},
            {"Authorization": f"Bearer {ghost}"},
            user_a.headers,
        ):
            response = await client.get(f"/api/blogs/{post['id']}", headers=headers)
            assert response.status_code == 200, headers

        final = await client.get(f"/api/blogs/{post['id']}")
        assert final.json()["read_count"] == 6
