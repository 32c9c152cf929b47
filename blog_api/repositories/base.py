"""Base repository for database operations."""

from collections.abc import Mapping
from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from blog_api.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
)

ModelT = TypeVar("ModelT", bound=SQLModel)


class BaseRepository(Generic[ModelT]):
    """
    Base repository implementing the persistence steps shared by entities.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
    """

    model: type[ModelT]
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column == record_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def delete(self, record: ModelT) -> None:
        """
        Delete a loaded record.

        Args:
            record: Record to delete
        """
        await self.session.delete(record)
        await self.session.flush()

    async def _add_and_refresh(
        self,
        record: ModelT,
        unique_values: Mapping[str, str] | None = None,
    ) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Args:
            record: Record to add
            unique_values: Submitted values of unique columns, keyed by column
                name, used to word the duplicate error

        Returns:
            ModelT: Refreshed record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other database errors
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            lowered = error_msg.lower()
            if "unique" in lowered or "duplicate" in lowered:
                for field, value in (unique_values or {}).items():
                    if field in lowered:
                        raise DuplicateEntryError(value=value, field=field) from e
                raise DuplicateEntryError from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(detail=f"Failed to save record: {e}") from e
        return record
