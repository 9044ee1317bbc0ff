"""Async engine and session factory for PostgreSQL (asyncpg)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from sonic.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Connection attempts give up after ``database.connect_timeout`` seconds so
    an unreachable server surfaces as 503 instead of a hung request.

    Args:
        settings: Application settings with database URL and pool sizing

    Returns:
        Configured async engine
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        connect_args={
            "timeout": database.connect_timeout,
            "server_settings": {"application_name": database.application_name},
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Repositories flush explicitly
    )
