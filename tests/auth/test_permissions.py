"""Tests for post ownership checks."""

from uuid import uuid4

import pytest

from blog_api.auth import ensure_post_owner, is_post_owner
from blog_api.errors import PostOwnershipError
from blog_api.models import PostDB, UserDB


@pytest.fixture
def owner() -> UserDB:
    return UserDB(
        id=uuid4(),
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        password_hash="$argon2id$v=19$m=19456,t=2,p=1$somehash",
    )


@pytest.fixture
def stranger() -> UserDB:
    return UserDB(
        id=uuid4(),
        first_name="Grace",
        last_name="Hopper",
        email="grace@example.com",
        password_hash="$argon2id$v=19$m=19456,t=2,p=1$somehash",
    )


@pytest.fixture
def post(owner: UserDB) -> PostDB:
    return PostDB(author_id=owner.id, title="Notes", body="Some words")


class TestIsPostOwner:
    """Test cases for is_post_owner."""

    def test_owner(self, owner: UserDB, post: PostDB) -> None:
        assert is_post_owner(owner, post) is True

    def test_stranger(self, stranger: UserDB, post: PostDB) -> None:
        assert is_post_owner(stranger, post) is False


class TestEnsurePostOwner:
    """Test cases for ensure_post_owner."""

    def test_owner_passes(self, owner: UserDB, post: PostDB) -> None:
        ensure_post_owner(owner, post, "update")

    @pytest.mark.parametrize("action", ["update", "delete"])
    def test_stranger_rejected(self, stranger: UserDB, post: PostDB, action: str) -> None:
        with pytest.raises(PostOwnershipError) as exc_info:
            ensure_post_owner(stranger, post, action)

        assert exc_info.value.status_code == 403
        assert exc_info.value.detail == f"You are not authorized to {action} this blog"
        assert exc_info.value.is_operational
