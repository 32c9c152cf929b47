"""
Blog post schemas.

Request bodies for creating and updating posts, the public response shapes
(with the author either inlined or referenced by id) and the enumerated
sort orders accepted by the listing endpoint.
"""

from datetime import datetime
from enum import Enum, StrEnum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from blog_api.configs.settings import MAX_TITLE_LENGTH
from blog_api.schemas.response import SuccessResponse


class PostState(StrEnum):
    DRAFT = "draft"
    PUBLISHED = "published"


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


class PostOrdering(Enum):
    """Supported listing orders as ``(field, direction)`` pairs."""

    READ_COUNT = ("read_count", SortDirection.DESC)
    READING_TIME = ("reading_time", SortDirection.ASC)
    TIMESTAMP = ("timestamp", SortDirection.DESC)

    @property
    def field(self) -> str:
        return self.value[0]

    @property
    def direction(self) -> SortDirection:
        return self.value[1]

    @classmethod
    def from_param(cls, value: str | None) -> "PostOrdering":
        """
        Resolve an ``orderBy`` query value.

        Unknown or missing values fall back to newest first.

        Examples
        --------
        >>> PostOrdering.from_param("read_count").direction
        <SortDirection.DESC: 'desc'>
        >>> PostOrdering.from_param("title") is PostOrdering.TIMESTAMP
        True
        """
        for ordering in cls:
            if ordering.field == value:
                return ordering
        return cls.TIMESTAMP


class PostCreate(BaseModel):
    """Post creation payload. The owner is always the caller."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TITLE_LENGTH,
        examples=["Notes on the Analytical Engine"],
    )
    description: str | None = Field(default=None, examples=["A short introduction"])
    body: str = Field(..., min_length=1, examples=["The Analytical Engine weaves..."])
    tags: list[str] = Field(default_factory=list, examples=[["history", "computing"]])
    state: PostState = Field(default=PostState.DRAFT, examples=["draft", "published"])


class PostUpdate(BaseModel):
    """
    Partial post update.

    Only fields present with a non-null value are applied. Unknown fields,
    including any attempt to change the owner, are ignored.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(default=None, min_length=1, max_length=MAX_TITLE_LENGTH)
    description: str | None = None
    body: str | None = Field(default=None, min_length=1)
    tags: list[str] | None = None
    state: PostState | None = None


class AuthorResponse(BaseModel):
    """Author details inlined into public post views."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    first_name: str
    last_name: str
    email: str


class PostResponse(BaseModel):
    """Post as returned to its owner, with ``author`` as the owner id."""

    id: UUID
    title: str
    description: str | None
    body: str
    tags: list[str]
    state: PostState
    read_count: int
    reading_time: str = Field(..., examples=["3 min read"])
    timestamp: datetime
    updated_at: datetime | None = None
    author: UUID


class PostWithAuthorResponse(PostResponse):
    """Post as returned by public listing and retrieval, with the author inlined."""

    author: AuthorResponse  # type: ignore[assignment]


class PostDetailResponse(SuccessResponse[PostWithAuthorResponse]):
    """Single post envelope, repeating the updated read count at the top level."""

    read_count: int
