"""Authentication and authorization errors."""

from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN

from blog_api.errors.base import BaseAppError


class UserAuthenticationError(BaseAppError):
    """Base class for authentication errors."""

    kind = "authentication"

    def __init__(
        self,
        detail: str = "Authentication failed",
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class UnauthenticatedError(UserAuthenticationError):
    """Raised when a protected route is called without a bearer token."""

    kind = "unauthenticated"

    def __init__(self) -> None:
        super().__init__("Not authorized, no token")


class InvalidTokenError(UserAuthenticationError):
    """Raised when a token is malformed, tampered with, or carries the wrong claims."""

    kind = "invalid_credential"

    def __init__(self, detail: str = "Invalid token. Please login again!") -> None:
        super().__init__(detail)


class TokenExpiredError(InvalidTokenError):
    """Raised when a correctly signed token is past its expiry."""

    def __init__(self) -> None:
        super().__init__("Your token has expired! Please login again.")


class IdentityNotFoundError(UserAuthenticationError):
    """Raised when a valid token references a user that no longer exists."""

    kind = "identity_not_found"

    def __init__(self) -> None:
        super().__init__("User no longer exists")


class InvalidCredentialsError(UserAuthenticationError):
    """Raised when login email or password is wrong."""

    kind = "invalid_login"

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class ForbiddenError(BaseAppError):
    """Raised when an authenticated caller may not perform an action."""

    kind = "forbidden"

    def __init__(self, detail: str = "You are not authorized to perform this action") -> None:
        super().__init__(detail, HTTP_403_FORBIDDEN)
