"""Database connection and session management.

Provides the async engine, the session factory and ``Database``, the
storage gateway repositories run their transactions through.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from blog.config import Settings


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    # SQLite ignores REFERENCES clauses unless enabled per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Statement timeouts are configured here, at the driver level, so no
    repository call can block indefinitely.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    database = settings.database
    url = make_url(settings.database_url)

    if url.get_backend_name() == "sqlite":
        engine = create_async_engine(
            url,
            echo=settings.debug,
            connect_args={"timeout": database.command_timeout},
        )
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_async_engine(
        url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        connect_args={"command_timeout": database.command_timeout},
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
        autoflush=False,  # Manual flushing for better control
    )


class Database:
    """Storage gateway: one logical connection to the relational store.

    Built once at startup by the DI container and disposed at shutdown.
    Repositories receive it explicitly and open one transaction per
    operation.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        """Initialize the gateway.

        Args:
            engine: Database engine owned for the process lifetime
        """
        self.engine = engine
        self.session_factory = create_session_factory(engine)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        """Open a session inside a transaction.

        The transaction commits when the block exits normally and rolls back
        when any exception escapes it, so a multi-statement operation is
        never observed half-applied.

        Yields:
            Database session bound to the transaction
        """
        async with self.session_factory() as session, session.begin():
            yield session

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
