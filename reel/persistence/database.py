"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from reel.config import DatabaseSettings


def create_engine(database: DatabaseSettings) -> AsyncEngine:
    """Create async database engine.

    Args:
        database: Connection URL and pool sizing

    Returns:
        Configured async engine
    """
    return create_async_engine(
        database.url,
        echo=database.echo,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Sessions keep loaded rows usable after commit, since repositories map
    them to domain models once the request has already committed.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
