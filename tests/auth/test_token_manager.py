"""Tests for the JWT token manager."""

from datetime import timedelta
from uuid import uuid4

import pytest
from jose import jwt

from blog_api.configs import settings
from blog_api.errors import InvalidTokenError, TokenExpiredError
from blog_api.managers.token_manager import (
    ACCESS_TOKEN_TYPE,
    create_access_token,
    decode_access_token,
)


class TestCreateAccessToken:
    """Test cases for create_access_token function."""

    def test_token_contains_correct_claims(self) -> None:
        """Decoding a fresh token returns the identity it was issued for."""
        user_id = uuid4()

        token = create_access_token(user_id=user_id, email="ada@example.com")
        token_data = decode_access_token(token)

        assert token_data.email == "ada@example.com"
        assert token_data.user_id == user_id
        assert token_data.token_type == ACCESS_TOKEN_TYPE
        assert token_data.jti

    def test_expires_exactly_one_hour_after_issue(self) -> None:
        """Default lifetime is 3600 seconds from issuance."""
        token = create_access_token(user_id=uuid4(), email="ada@example.com")
        claims = jwt.get_unverified_claims(token)

        assert claims["exp"] - claims["iat"] == 3600

    def test_custom_expiration(self) -> None:
        """Custom expiration deltas are honoured."""
        token = create_access_token(
            user_id=uuid4(),
            email="ada@example.com",
            expires_delta=timedelta(minutes=5),
        )
        claims = jwt.get_unverified_claims(token)

        assert claims["exp"] - claims["iat"] == 300

    def test_each_token_has_unique_jti(self) -> None:
        """Two tokens for the same user never share an ID."""
        user_id = uuid4()
        first = decode_access_token(create_access_token(user_id, "ada@example.com"))
        second = decode_access_token(create_access_token(user_id, "ada@example.com"))

        assert first.jti != second.jti


class TestDecodeAccessToken:
    """Test cases for decode_access_token function."""

    def test_rejects_malformed_token(self) -> None:
        """Garbage is reported as an invalid token."""
        with pytest.raises(InvalidTokenError) as exc_info:
            decode_access_token("invalid.token.here")

        assert not isinstance(exc_info.value, TokenExpiredError)

    def test_rejects_expired_token(self) -> None:
        """Expired tokens are distinguished from malformed ones."""
        token = create_access_token(
            user_id=uuid4(),
            email="ada@example.com",
            expires_delta=timedelta(seconds=-1),
        )

        with pytest.raises(TokenExpiredError) as exc_info:
            decode_access_token(token)

        assert exc_info.value.detail == "Your token has expired! Please login again."
        assert exc_info.value.status_code == 401

    def test_rejects_wrong_signature(self) -> None:
        """Tokens signed with another key are invalid."""
        token = jwt.encode(
            {
                "sub": "ada@example.com",
                "user_id": str(uuid4()),
                "jti": "abc",
                "type": ACCESS_TOKEN_TYPE,
                "iss": settings.JWT_ISSUER,
                "aud": settings.JWT_AUDIENCE,
            },
            "some-other-key",
            algorithm=settings.ALGORITHM,
        )

        with pytest.raises(InvalidTokenError):
            decode_access_token(token)

    def test_rejects_wrong_token_type(self) -> None:
        """Correctly signed tokens of another type are refused."""
        token = jwt.encode(
            {
                "sub": "ada@example.com",
                "user_id": str(uuid4()),
                "jti": "abc",
                "type": "refresh",
                "iss": settings.JWT_ISSUER,
                "aud": settings.JWT_AUDIENCE,
            },
            settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
        )

        with pytest.raises(InvalidTokenError):
            decode_access_token(token)

    def test_rejects_non_uuid_user_id(self) -> None:
        """A user_id claim that is not a UUID is invalid."""
        token = jwt.encode(
            {
                "sub": "ada@example.com",
                "user_id": "not-a-uuid",
                "jti": "abc",
                "type": ACCESS_TOKEN_TYPE,
                "iss": settings.JWT_ISSUER,
                "aud": settings.JWT_AUDIENCE,
            },
            settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
        )

        with pytest.raises(InvalidTokenError):
            decode_access_token(token)
