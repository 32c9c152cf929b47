"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel

from blog_api.configs import pool_kwargs, settings
from blog_api.errors import BaseAppError
from blog_api.monitoring import get_logger

logger = get_logger(__name__)


def _configure_engine_events(engine: AsyncEngine) -> None:
    """Configure connection pool events for monitoring."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("New database connection established")

    @event.listens_for(engine.sync_engine, "checkout")
    def on_checkout(
        dbapi_connection: object,
        connection_record: object,
        connection_proxy: object,
    ) -> None:
        logger.debug("Connection checked out from pool")

    @event.listens_for(engine.sync_engine, "checkin")
    def on_checkin(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("Connection returned to pool")


engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
    **pool_kwargs(settings.DATABASE_URL),
)

if settings.DEBUG:
    _configure_engine_events(engine)

async_session_maker: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


@asynccontextmanager
async def transaction(
    session_maker: async_sessionmaker[AsyncSession] | None = None,
) -> AsyncGenerator[AsyncSession]:
    """
    Context manager for explicit transaction management.

    Commits on successful exit and rolls back on any exception. Operational
    application errors (not found, forbidden, duplicates) are expected and
    are not logged here; anything else is.

    Args:
        session_maker: Optional session factory, defaults to the application one

    Yields:
        AsyncSession: Database session within a transaction

    Example:
        ```python
        async with transaction() as session:
            session.add(UserDB(first_name="Ada", ...))
        ```
    """
    async with (session_maker or async_session_maker)() as session:
        try:
            yield session
            await session.commit()
        except Exception as e:
            await session.rollback()
            if not (isinstance(e, BaseAppError) and e.is_operational):
                logger.exception("Transaction error")
            raise
        finally:
            await session.close()


async def get_session() -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    Yields:
        AsyncSession: Database session
    """
    async with transaction() as session:
        yield session


async def init_db(db_engine: AsyncEngine | None = None) -> None:
    """
    Create all tables defined in SQLModel models.

    Note:
        This is a simple initialization for development and tests.
        For production, run the Alembic migrations instead.
    """
    async with (db_engine or engine).begin() as conn:
        # Import all models to ensure they are registered
        from blog_api.models import PostDB, UserDB  # noqa: F401, PLC0415

        await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database initialized successfully!")


async def close_db() -> None:
    """Dispose of the engine's connection pool on shutdown."""
    await engine.dispose()
    logger.info("Database connections closed")
