"""
Post service enforcing who can see and change which posts.

Rules
-----
- Anyone may list and read ``published`` posts; drafts never appear in
  public listings and are never individually retrievable, not even by
  their owner.
- Reading a single post always bumps its read count, before visibility is
  checked.
- Only the owner may update or delete a post, and ownership is checked
  before anything is written.
- The owner listing shows every post of the caller, drafts included.
"""

from uuid import UUID

from blog_api.auth.permissions import ensure_post_owner
from blog_api.errors import PostNotFoundError
from blog_api.models import PostDB, UserDB
from blog_api.monitoring import get_logger
from blog_api.repositories import PostFilter, PostRepository, UserRepository
from blog_api.schemas.post import PostCreate, PostOrdering, PostState, PostUpdate

logger = get_logger(__name__)


def page_offset(page: int, limit: int) -> int:
    """Offset of the first row on a 1-based page."""
    return (page - 1) * limit


class PostService:
    """Service applying visibility and ownership rules on top of the post store."""

    def __init__(self, post_repo: PostRepository, user_repo: UserRepository) -> None:
        """
        Initialize the post service.

        Args:
            post_repo: Post repository
            user_repo: User repository, used to resolve author name searches
        """
        self.post_repo = post_repo
        self.user_repo = user_repo

    async def create_post(self, data: PostCreate, user: UserDB) -> PostDB:
        """
        Create a post owned by the caller.

        Args:
            data: Post creation payload
            user: Authenticated caller, who becomes the owner

        Returns:
            PostDB: Created post
        """
        post = await self.post_repo.create(data, author_id=user.id)
        logger.info(f"Post {post.id} created by user {user.id} as {post.state}")
        return post

    async def list_published(
        self,
        *,
        search: str | None,
        author_id: UUID | None,
        tag: str | None,
        ordering: PostOrdering,
        page: int,
        limit: int,
    ) -> tuple[list[tuple[PostDB, UserDB]], int]:
        """
        List published posts with their authors.

        Args:
            search: Case-insensitive term matched against title, description,
                tags and the author's first or last name
            author_id: Restrict to one owner
            tag: Restrict to posts carrying this exact tag
            ordering: Sort order
            page: 1-based page number
            limit: Page size

        Returns:
            tuple: The page of ``(post, author)`` pairs and the total match count
        """
        author_ids_by_name: list[UUID] = []
        if search:
            author_ids_by_name = await self.user_repo.search_ids_by_name(search)

        criteria = PostFilter(
            state=PostState.PUBLISHED,
            author_id=author_id,
            tag=tag,
            search=search or None,
            author_ids_by_name=tuple(author_ids_by_name),
        )
        rows = await self.post_repo.list_with_authors(
            criteria,
            ordering,
            offset=page_offset(page, limit),
            limit=limit,
        )
        total = await self.post_repo.count(criteria)
        return rows, total

    async def get_published_post(self, post_id: UUID) -> tuple[PostDB, UserDB]:
        """
        Read a single published post, counting the read.

        The read count is incremented and committed first, whether or not
        the post turns out to be visible.

        Args:
            post_id: Post UUID

        Returns:
            tuple[PostDB, UserDB]: The post and its author

        Raises:
            PostNotFoundError: If the post does not exist or is not published
        """
        await self.post_repo.increment_read_count(post_id)
        row = await self.post_repo.get_with_author(post_id)
        if row is None or row[0].state != PostState.PUBLISHED:
            raise PostNotFoundError
        return row

    async def update_post(self, post_id: UUID, changes: PostUpdate, user: UserDB) -> PostDB:
        """
        Apply a partial update to a post owned by the caller.

        Args:
            post_id: Post UUID
            changes: Fields to replace
            user: Authenticated caller

        Returns:
            PostDB: Updated post

        Raises:
            PostNotFoundError: If the post does not exist
            PostOwnershipError: If the caller is not the owner
        """
        post = await self._get_owned_post(post_id, user, "update")
        updated = await self.post_repo.update(post, changes)
        logger.info(f"Post {post_id} updated by user {user.id}")
        return updated

    async def delete_post(self, post_id: UUID, user: UserDB) -> None:
        """
        Delete a post owned by the caller.

        Args:
            post_id: Post UUID
            user: Authenticated caller

        Raises:
            PostNotFoundError: If the post does not exist
            PostOwnershipError: If the caller is not the owner
        """
        post = await self._get_owned_post(post_id, user, "delete")
        await self.post_repo.delete(post)
        logger.info(f"Post {post_id} deleted by user {user.id}")

    async def list_owned(
        self,
        user: UserDB,
        *,
        state: str | None,
        page: int,
        limit: int,
    ) -> tuple[list[PostDB], int]:
        """
        List the caller's own posts, newest first.

        Args:
            user: Authenticated caller
            state: ``draft`` or ``published`` to filter; any other value is ignored
            page: 1-based page number
            limit: Page size

        Returns:
            tuple: The page of posts and the total match count
        """
        state_filter = PostState(state) if state in set(PostState) else None
        criteria = PostFilter(state=state_filter, author_id=user.id)
        posts = await self.post_repo.list_posts(
            criteria,
            PostOrdering.TIMESTAMP,
            offset=page_offset(page, limit),
            limit=limit,
        )
        total = await self.post_repo.count(criteria)
        return posts, total

    async def _get_owned_post(self, post_id: UUID, user: UserDB, action: str) -> PostDB:
        post = await self.post_repo.get_by_id(post_id)
        if post is None:
            raise PostNotFoundError
        ensure_post_owner(user, post, action)
        return post
