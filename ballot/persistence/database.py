"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ballot.config import Settings

APPLICATION_NAME = "ballot-api"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg-backed engine.

    Connections identify themselves as ``ballot-api`` in
    ``pg_stat_activity`` and are recycled after ``database.pool_recycle``
    seconds.

    Args:
        settings: Application settings

    Returns:
        Engine with a pre-pinged connection pool
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        pool_recycle=database.pool_recycle,
        connect_args={"server_settings": {"application_name": APPLICATION_NAME}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the per-request session factory.

    Objects stay usable after commit and nothing is flushed implicitly;
    repositories issue Core statements through the session.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
