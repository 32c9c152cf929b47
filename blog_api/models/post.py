"""Blog post database model using SQLModel."""

from datetime import datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import JSON, DateTime, Index, Text, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String

from blog_api.configs.settings import MAX_TITLE_LENGTH
from blog_api.utils.helpers import utcnow

# JSONB on PostgreSQL, plain JSON text elsewhere
TagsType = JSON().with_variant(JSONB(), "postgresql")


class PostDB(SQLModel, table=True):
    """
    Blog post database model.

    A post has exactly one owner, fixed at creation. ``read_count`` only
    grows through single-post retrieval and ``reading_time_minutes`` is
    derived from ``body``.
    """

    __tablename__ = cast("declared_attr[str]", "posts")

    __table_args__ = (
        Index("ix_posts_state_timestamp", "state", "timestamp"),
        Index("ix_posts_author_state", "author_id", "state"),
    )

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Post ID",
    )

    author_id: UUID = Field(
        sa_column=Column(
            "author_id",
            Uuid(),
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Owner ID (foreign key to users.id)",
    )

    title: str = Field(
        sa_column=Column(String(MAX_TITLE_LENGTH), unique=True, nullable=False, index=True),
        description="Post title (unique)",
    )
    description: str | None = Field(
        default=None,
        sa_column=Column(Text),
        description="Short description",
    )
    body: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Post body",
    )
    tags: list[str] = Field(
        default_factory=list,
        sa_column=Column(TagsType, nullable=False),
        description="Tags, in submission order",
    )

    state: str = Field(
        default="draft",
        sa_column=Column(String(20), nullable=False, index=True, server_default="draft"),
        description="Visibility state (draft, published)",
    )
    read_count: int = Field(
        default=0,
        nullable=False,
        description="Number of single-post retrievals",
    )
    reading_time_minutes: int = Field(
        default=1,
        nullable=False,
        description="Estimated reading time in minutes",
    )

    timestamp: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "author_id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "Notes on the Analytical Engine",
                "description": "A short introduction",
                "body": "The Analytical Engine weaves algebraic patterns...",
                "tags": ["history", "computing"],
                "state": "draft",
                "read_count": 0,
                "reading_time_minutes": 1,
            },
        },
    )
