"""User repository for database operations."""

from typing import cast
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.sql.expression import ColumnElement

from blog_api.models.user import UserDB
from blog_api.repositories.base import BaseRepository
from blog_api.schemas.user import UserCreate


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    Passwords arrive here already hashed; this layer never sees plaintext.
    """

    model = UserDB

    async def create(self, user: UserCreate, password_hash: str) -> UserDB:
        """
        Create a new user in the database.

        Args:
            user: Signup payload
            password_hash: One-way hash of the submitted password

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If the email already exists
            DatabaseError: For other database errors
        """
        db_user = UserDB(
            first_name=user.first_name,
            last_name=user.last_name,
            email=str(user.email),
            password_hash=password_hash,
        )
        return await self._add_and_refresh(db_user, unique_values={"email": db_user.email})

    async def get_by_email(self, email: str) -> UserDB | None:
        """
        Get user by email.

        Args:
            email: Email address

        Returns:
            UserDB | None: User if found, None otherwise
        """
        statement = select(UserDB).where(cast(ColumnElement[bool], UserDB.email == email))
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def search_ids_by_name(self, term: str) -> list[UUID]:
        """
        Find users whose first or last name contains a term, ignoring case.

        Args:
            term: Search term

        Returns:
            list[UUID]: IDs of matching users
        """
        statement = select(UserDB.id).where(
            or_(
                UserDB.first_name.icontains(term, autoescape=True),  # type: ignore[attr-defined]
                UserDB.last_name.icontains(term, autoescape=True),  # type: ignore[attr-defined]
            ),
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update_password_hash(self, user: UserDB, password_hash: str) -> UserDB:
        """Replace a user's stored hash, e.g. after a scheme upgrade."""
        user.password_hash = password_hash
        return await self._add_and_refresh(user)
