"""Errors raised by the post visibility and ownership rules."""

from blog_api.errors.auth import ForbiddenError
from blog_api.errors.database import RecordNotFoundError


class PostNotFoundError(RecordNotFoundError):
    """Raised when a post does not exist or is not visible to the caller."""

    def __init__(self) -> None:
        super().__init__("Blog not found")


class PostOwnershipError(ForbiddenError):
    """Raised when a caller tries to mutate a post they do not own."""

    def __init__(self, action: str) -> None:
        super().__init__(f"You are not authorized to {action} this blog")
        self.action = action
