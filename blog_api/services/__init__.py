from blog_api.services.auth import AuthService
from blog_api.services.post import PostService

__all__ = ["AuthService", "PostService"]
