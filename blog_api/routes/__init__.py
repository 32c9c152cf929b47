from blog_api.routes.auth import router as auth_router
from blog_api.routes.post import router as post_router

__all__ = ["auth_router", "post_router"]
