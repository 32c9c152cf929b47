from blog_api.errors.auth import (
    ForbiddenError,
    IdentityNotFoundError,
    InvalidCredentialsError,
    InvalidTokenError,
    TokenExpiredError,
    UnauthenticatedError,
    UserAuthenticationError,
)
from blog_api.errors.base import (
    BaseAppError,
    app_exception_handler,
    create_exception_handler,
    error_content,
    http_exception_handler,
    unhandled_exception_handler,
)
from blog_api.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    RecordNotFoundError,
)
from blog_api.errors.password_hasher import PasswordHashingError, PasswordRehashError
from blog_api.errors.post import PostNotFoundError, PostOwnershipError
from blog_api.errors.validation import validation_exception_handler

__all__ = [
    "BaseAppError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DuplicateEntryError",
    "ForbiddenError",
    "IdentityNotFoundError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "PasswordHashingError",
    "PasswordRehashError",
    "PostNotFoundError",
    "PostOwnershipError",
    "RecordNotFoundError",
    "TokenExpiredError",
    "UnauthenticatedError",
    "UserAuthenticationError",
    "app_exception_handler",
    "create_exception_handler",
    "error_content",
    "http_exception_handler",
    "unhandled_exception_handler",
    "validation_exception_handler",
]
