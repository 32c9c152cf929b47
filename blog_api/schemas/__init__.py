from blog_api.schemas.auth import LoginRequest, Token, TokenData
from blog_api.schemas.post import (
    AuthorResponse,
    PostCreate,
    PostDetailResponse,
    PostOrdering,
    PostResponse,
    PostState,
    PostUpdate,
    PostWithAuthorResponse,
    SortDirection,
)
from blog_api.schemas.response import (
    ErrorResponse,
    HealthCheckResponse,
    ListResponse,
    SuccessResponse,
)
from blog_api.schemas.user import SignupData, UserCreate, UserResponse

__all__ = [
    "AuthorResponse",
    "ErrorResponse",
    "HealthCheckResponse",
    "ListResponse",
    "LoginRequest",
    "PostCreate",
    "PostDetailResponse",
    "PostOrdering",
    "PostResponse",
    "PostState",
    "PostUpdate",
    "PostWithAuthorResponse",
    "SignupData",
    "SortDirection",
    "SuccessResponse",
    "Token",
    "TokenData",
    "UserCreate",
    "UserResponse",
]
