from blog_api.repositories.post import PostFilter, PostRepository
from blog_api.repositories.user import UserRepository

__all__ = ["PostFilter", "PostRepository", "UserRepository"]
