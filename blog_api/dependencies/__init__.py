from blog_api.dependencies.dependencies import (
    AuthServiceDep,
    CurrentUserDep,
    OptionalUserDep,
    OwnerPostQueryDep,
    PostListQueryDep,
    PostServiceDep,
    get_current_user,
    get_optional_user,
)

__all__ = [
    "AuthServiceDep",
    "CurrentUserDep",
    "OptionalUserDep",
    "OwnerPostQueryDep",
    "PostListQueryDep",
    "PostServiceDep",
    "get_current_user",
    "get_optional_user",
]
