"""Ownership checks for blog posts."""

from blog_api.errors import PostOwnershipError
from blog_api.models import PostDB, UserDB


def is_post_owner(user: UserDB, post: PostDB) -> bool:
    """
    Check whether a user owns a post.

    Args:
        user: Authenticated user
        post: Post being accessed

    Returns:
        bool: True if the user is the post's author
    """
    return post.author_id == user.id


def ensure_post_owner(user: UserDB, post: PostDB, action: str) -> None:
    """
    Require that a user owns a post before mutating it.

    Args:
        user: Authenticated user
        post: Post being mutated
        action: Verb used in the error message, e.g. "update" or "delete"

    Raises:
        PostOwnershipError: If the user is not the post's author
    """
    if not is_post_owner(user, post):
        raise PostOwnershipError(action)
