"""Tests for the Argon2 password hasher."""

import pytest
from passlib.hash import pbkdf2_sha256

from blog_api.managers.password_manager import (
    PasswordHasher,
    hash_password,
    verify_and_update_password,
    verify_password,
)


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(level="low")


class TestPasswordHasher:
    """Test cases for the synchronous hasher."""

    def test_hash_differs_from_plaintext(self, hasher: PasswordHasher) -> None:
        """Stored hashes never equal the submitted password."""
        hashed = hasher.hash("password123")

        assert hashed != "password123"
        assert hashed.startswith("$argon2id$")

    def test_hash_is_salted(self, hasher: PasswordHasher) -> None:
        """Hashing the same password twice yields different hashes."""
        assert hasher.hash("password123") != hasher.hash("password123")

    def test_empty_password_rejected(self, hasher: PasswordHasher) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            hasher.hash("")

    def test_verify_correct_and_wrong_password(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("password123")

        assert hasher.verify("password123", hashed) is True
        assert hasher.verify("password124", hashed) is False

    def test_verify_without_hash_returns_false(self, hasher: PasswordHasher) -> None:
        """Unknown accounts are rejected without raising."""
        assert hasher.verify("password123", None) is False
        assert hasher.verify("password123", "   ") is False

    def test_verify_corrupted_hash_returns_false(self, hasher: PasswordHasher) -> None:
        assert hasher.verify("password123", "not-a-real-hash") is False

    def test_pbkdf2_hash_upgraded_on_verify(self, hasher: PasswordHasher) -> None:
        """Legacy PBKDF2 hashes verify and come back as Argon2id."""
        legacy = pbkdf2_sha256.hash("password123")

        is_valid, new_hash = hasher.verify_and_update("password123", legacy)

        assert is_valid is True
        assert new_hash is not None
        assert new_hash.startswith("$argon2id$")

    def test_current_hash_not_rehashed(self, hasher: PasswordHasher) -> None:
        is_valid, new_hash = hasher.verify_and_update("password123", hasher.hash("password123"))

        assert is_valid is True
        assert new_hash is None

    def test_wrong_password_never_rehashed(self, hasher: PasswordHasher) -> None:
        legacy = pbkdf2_sha256.hash("password123")

        assert hasher.verify_and_update("wrong-password", legacy) == (False, None)


class TestAsyncHelpers:
    """Test cases for the executor-backed helpers."""

    async def test_hash_then_verify(self) -> None:
        hashed = await hash_password("password123")

        assert await verify_password("password123", hashed) is True
        assert await verify_password("nope-nope", hashed) is False

    async def test_verify_and_update(self) -> None:
        hashed = await hash_password("password123")

        assert await verify_and_update_password("password123", hashed) == (True, None)
