"""Token manager for issuing and verifying signed JWT access tokens."""

from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

from jose import ExpiredSignatureError, JWTError, jwt

from blog_api.configs import settings
from blog_api.errors import InvalidTokenError, TokenExpiredError
from blog_api.schemas.auth import TokenData

ACCESS_TOKEN_TYPE = "access"


def access_token_lifetime() -> timedelta:
    """Configured lifetime of an access token."""
    return timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)


def create_access_token(
    user_id: UUID,
    email: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a new access token bound to a user.

    Args:
        user_id: User's UUID
        email: User's email, stored as the subject
        expires_delta: Optional expiration time delta, defaults to the configured lifetime

    Returns:
        str: Encoded JWT access token
    """
    now = datetime.now(UTC)
    expire = now + (expires_delta if expires_delta is not None else access_token_lifetime())

    to_encode = {
        "sub": email,
        "user_id": str(user_id),
        "jti": str(uuid4()),
        "iat": now,
        "exp": expire,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "type": ACCESS_TOKEN_TYPE,
    }

    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> TokenData:
    """
    Decode and validate an access token.

    Args:
        token: JWT token string

    Returns:
        TokenData: Decoded token data

    Raises:
        TokenExpiredError: If the token is correctly signed but expired
        InvalidTokenError: If the token is malformed, tampered with, or has wrong claims
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
        )
    except ExpiredSignatureError as e:
        raise TokenExpiredError from e
    except JWTError as e:
        raise InvalidTokenError from e

    email: str | None = payload.get("sub")
    user_id: str | None = payload.get("user_id")
    jti: str | None = payload.get("jti")
    token_type: str | None = payload.get("type")

    if not email or not user_id or not jti or token_type != ACCESS_TOKEN_TYPE:
        raise InvalidTokenError

    try:
        return TokenData(
            email=email,
            user_id=UUID(user_id),
            jti=jti,
            token_type=token_type,
        )
    except ValueError as e:
        raise InvalidTokenError from e

