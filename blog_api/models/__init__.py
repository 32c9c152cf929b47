"""Database models for the application."""

from blog_api.models.post import PostDB
from blog_api.models.user import UserDB

__all__ = ["PostDB", "UserDB"]
