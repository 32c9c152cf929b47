"""Post repository for database operations."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, cast
from uuid import UUID

from sqlalchemy import Boolean, String, asc, desc, func, or_, select, type_coerce, update
from sqlalchemy import cast as sql_cast
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql.expression import ColumnElement
from sqlalchemy.sql.selectable import TableValuedAlias

from blog_api.models.post import PostDB
from blog_api.models.user import UserDB
from blog_api.repositories.base import BaseRepository
from blog_api.schemas.post import PostCreate, PostOrdering, PostState, PostUpdate, SortDirection
from blog_api.utils.helpers import calculate_reading_time, utcnow

ORDER_COLUMNS: dict[str, Any] = {
    "read_count": PostDB.read_count,
    "reading_time": PostDB.reading_time_minutes,
    "timestamp": PostDB.timestamp,
}


@dataclass(frozen=True)
class PostFilter:
    """
    Listing criteria, all optional and combined with AND.

    ``author_ids_by_name`` holds owners whose name matched ``search``;
    posts by any of them match the search even if their text does not.
    """

    state: PostState | None = None
    author_id: UUID | None = None
    tag: str | None = None
    search: str | None = None
    author_ids_by_name: Sequence[UUID] = field(default_factory=tuple)


def _tag_elements(dialect: str) -> TableValuedAlias:
    """Expand the row's tags into a one-column ``value`` table."""
    if dialect == "postgresql":
        return func.jsonb_array_elements_text(sql_cast(PostDB.tags, JSONB)).table_valued("value")
    return func.json_each(PostDB.tags).table_valued("value")


def _has_tag(tag: str, dialect: str) -> ColumnElement[bool]:
    if dialect == "postgresql":
        return func.jsonb_exists(sql_cast(PostDB.tags, JSONB), tag, type_=Boolean)
    elements = _tag_elements(dialect)
    return select(elements.c.value).where(elements.c.value == tag).exists()


def _any_tag_contains(term: str, dialect: str) -> ColumnElement[bool]:
    elements = _tag_elements(dialect)
    value = type_coerce(elements.c.value, String)
    return select(value).where(value.icontains(term, autoescape=True)).exists()


def build_conditions(criteria: PostFilter, dialect: str = "sqlite") -> list[ColumnElement[bool]]:
    """
    Translate listing criteria into SQL WHERE clauses.

    Tags are matched element by element, never against the column's JSON text.
    """
    conditions: list[ColumnElement[bool]] = []

    if criteria.state is not None:
        conditions.append(cast(ColumnElement[bool], PostDB.state == criteria.state.value))

    if criteria.author_id is not None:
        conditions.append(cast(ColumnElement[bool], PostDB.author_id == criteria.author_id))

    if criteria.tag is not None:
        conditions.append(_has_tag(criteria.tag, dialect))

    if criteria.search:
        term = criteria.search
        matches = [
            PostDB.title.icontains(term, autoescape=True),  # type: ignore[attr-defined]
            PostDB.description.icontains(term, autoescape=True),  # type: ignore[union-attr]
            _any_tag_contains(term, dialect),
        ]
        if criteria.author_ids_by_name:
            matches.append(
                PostDB.author_id.in_(criteria.author_ids_by_name),  # type: ignore[attr-defined]
            )
        conditions.append(or_(*matches))

    return conditions


class PostRepository(BaseRepository[PostDB]):
    """
    Repository for Post database operations.

    Visibility and ownership decisions live in the post service; this class
    only stores and fetches.
    """

    model = PostDB

    @property
    def dialect(self) -> str:
        """Name of the backend the session is bound to."""
        return self.session.get_bind().dialect.name

    async def create(self, post: PostCreate, author_id: UUID) -> PostDB:
        """
        Create a new post owned by ``author_id``.

        Args:
            post: Post creation payload
            author_id: Owner's user ID

        Returns:
            PostDB: Created post

        Raises:
            DuplicateEntryError: If the title is already taken
            DatabaseError: For other database errors
        """
        db_post = PostDB(
            author_id=author_id,
            title=post.title,
            description=post.description,
            body=post.body,
            tags=list(post.tags),
            state=post.state.value,
            reading_time_minutes=calculate_reading_time(post.body),
        )
        return await self._add_and_refresh(db_post, unique_values={"title": post.title})

    async def get_with_author(self, post_id: UUID) -> tuple[PostDB, UserDB] | None:
        """
        Get a post together with its owner.

        Args:
            post_id: Post UUID

        Returns:
            tuple[PostDB, UserDB] | None: Post and owner if found
        """
        statement = (
            select(PostDB, UserDB)
            .join(UserDB, cast(ColumnElement[bool], PostDB.author_id == UserDB.id))
            .where(cast(ColumnElement[bool], PostDB.id == post_id))
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(statement)
        row = result.first()
        return (row[0], row[1]) if row else None

    async def get_by_title(self, title: str) -> PostDB | None:
        """Get a post by its exact title."""
        statement = select(PostDB).where(cast(ColumnElement[bool], PostDB.title == title))
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def increment_read_count(self, post_id: UUID) -> None:
        """
        Atomically add one to a post's read count and commit immediately.

        The increment is durable even if the caller later fails the request.

        Args:
            post_id: Post UUID
        """
        statement = (
            update(PostDB)
            .where(cast(ColumnElement[bool], PostDB.id == post_id))
            .values(read_count=PostDB.read_count + 1)
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(statement)
        await self.session.commit()

    async def list_with_authors(
        self,
        criteria: PostFilter,
        ordering: PostOrdering,
        offset: int,
        limit: int,
    ) -> list[tuple[PostDB, UserDB]]:
        """
        List posts matching criteria, each paired with its owner.

        Args:
            criteria: Filters to apply
            ordering: Sort field and direction
            offset: Number of rows to skip
            limit: Maximum number of rows to return

        Returns:
            list[tuple[PostDB, UserDB]]: Matching posts and their owners
        """
        statement = (
            select(PostDB, UserDB)
            .join(UserDB, cast(ColumnElement[bool], PostDB.author_id == UserDB.id))
            .where(*build_conditions(criteria, self.dialect))
            .order_by(*self._order_by(ordering))
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(statement)
        return [(post, author) for post, author in result.all()]

    async def list_posts(
        self,
        criteria: PostFilter,
        ordering: PostOrdering,
        offset: int,
        limit: int,
    ) -> list[PostDB]:
        """List posts matching criteria without loading owners."""
        statement = (
            select(PostDB)
            .where(*build_conditions(criteria, self.dialect))
            .order_by(*self._order_by(ordering))
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def count(self, criteria: PostFilter) -> int:
        """
        Count posts matching criteria, ignoring pagination.

        Args:
            criteria: Filters to apply

        Returns:
            int: Number of matching posts
        """
        statement = (
            select(func.count())
            .select_from(PostDB)
            .where(*build_conditions(criteria, self.dialect))
        )
        result = await self.session.execute(statement)
        return result.scalar() or 0

    async def update(self, post: PostDB, changes: PostUpdate) -> PostDB:
        """
        Apply a partial update to a loaded post.

        Args:
            post: Post to update
            changes: Fields to replace; absent or null fields are left alone

        Returns:
            PostDB: Updated post

        Raises:
            DuplicateEntryError: If the new title is already taken
        """
        data = changes.model_dump(exclude_unset=True, exclude_none=True)
        if not data:
            return post

        if "body" in data:
            data["reading_time_minutes"] = calculate_reading_time(data["body"])
        if "state" in data:
            data["state"] = PostState(data["state"]).value

        for key, value in data.items():
            setattr(post, key, value)
        post.updated_at = utcnow()

        return await self._add_and_refresh(post, unique_values={"title": post.title})

    @staticmethod
    def _order_by(ordering: PostOrdering) -> list[Any]:
        column = ORDER_COLUMNS[ordering.field]
        primary = desc(column) if ordering.direction is SortDirection.DESC else asc(column)
        if ordering is PostOrdering.TIMESTAMP:
            return [primary, desc(PostDB.id)]
        return [primary, desc(PostDB.timestamp)]
