from blog_api.auth.permissions import ensure_post_owner, is_post_owner

__all__ = ["ensure_post_owner", "is_post_owner"]
