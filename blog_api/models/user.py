"""User database model using SQLModel."""

from datetime import datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from blog_api.configs.settings import MAX_NAME_LENGTH
from blog_api.utils.helpers import utcnow


class UserDB(SQLModel, table=True):
    """
    User database model.

    Users are only ever created by signup. The posts a user owns are
    reachable through ``posts.author_id``.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="User ID",
    )

    first_name: str = Field(
        sa_column=Column(String(MAX_NAME_LENGTH), nullable=False),
        description="User first name",
    )
    last_name: str = Field(
        sa_column=Column(String(MAX_NAME_LENGTH), nullable=False),
        description="User last name",
    )
    email: str = Field(
        sa_column=Column(String(255), unique=True, nullable=False, index=True),
        description="Email address (unique)",
    )
    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="One-way salted password hash",
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "first_name": "Ada",
                "last_name": "Lovelace",
                "email": "ada@example.com",
            },
        },
    )
