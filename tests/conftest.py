# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Settings are read at import time, so the test environment must be in place
# before anything from blog_api is imported
os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DATABASE_AUTO_CREATE"] = "false"
os.environ["LOG_TO_FILE"] = "false"
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"  # noqa: S105

from collections.abc import AsyncGenerator, Awaitable, Callable  # noqa: E402
from typing import Any  # noqa: E402
from uuid import UUID  # noqa: E402

from httpx import ASGITransport, AsyncClient  # noqa: E402
from pytest import fixture  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from blog_api.db import get_session, init_db, transaction  # noqa: E402
from blog_api.main import app  # noqa: E402
from blog_api.managers.rate_limiter import limiter  # noqa: E402

from tests.factories import TEST_PASSWORD, AuthedUser  # noqa: E402


@fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_db(engine)
    yield engine
    await engine.dispose()


@fixture
def session_maker(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test database."""
    return async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@fixture
async def db_session(
    session_maker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    """Session for tests that talk to repositories directly."""
    async with session_maker() as session:
        yield session


@fixture
async def client(
    session_maker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client wired to the test database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession]:
        async with transaction(session_maker) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    limiter.enabled = False
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@fixture
def signup_and_login(client: AsyncClient) -> Callable[..., Awaitable[AuthedUser]]:
    """Factory that signs a user up, logs them in and returns their credentials."""

    async def _create(
        first_name: str,
        last_name: str,
        email: str,
        password: str = TEST_PASSWORD,
    ) -> AuthedUser:
        signup = await client.post(
            "/api/auth/signup",
            json={
                "first_name": first_name,
                "last_name": last_name,
                "email": email,
                "password": password,
            },
        )
        assert signup.status_code == 201, signup.text
        user = signup.json()["data"]["user"]

        login = await client.post(
            "/api/auth/login",
            json={"email": email, "password": password},
        )
        assert login.status_code == 200, login.text
        return AuthedUser(
            id=UUID(user["id"]),
            email=email,
            first_name=first_name,
            last_name=last_name,
            token=login.json()["data"]["token"],
        )

    return _create


@fixture
async def user_a(signup_and_login: Callable[..., Awaitable[AuthedUser]]) -> AuthedUser:
    return await signup_and_login("Ada", "Lovelace", "ada@example.com")


@fixture
async def user_b(signup_and_login: Callable[..., Awaitable[AuthedUser]]) -> AuthedUser:
    return await signup_and_login("Grace", "Hopper", "grace@example.com")


@fixture
def create_post(client: AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    """Factory that creates a post as the given user and returns its data."""

    async def _create(owner: AuthedUser, **fields: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "title": "Untitled",
            "description": "A short introduction",
            "body": "Some words about nothing in particular.",
            "tags": ["general"],
        }
        payload.update(fields)
        response = await client.post("/api/blogs", json=payload, headers=owner.headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create
