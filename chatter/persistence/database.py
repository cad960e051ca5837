"""Database connection management.

``Database`` owns the single async engine of the process. It is opened once
at application start and disposed at shutdown by the DI container.
"""

import logfire
from sqlalchemy.exc import ArgumentError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from chatter.config import Settings
from chatter.persistence.error import (
    DatabaseConnectionError,
    DatabaseNotConfiguredError,
)


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
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
        autocommit=False,  # Explicit transaction management
    )


class Database:
    """Process-wide database handle."""

    def __init__(self, settings: Settings) -> None:
        """Initialize an unconnected handle.

        Args:
            settings: Application settings
        """
        self.settings = settings
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def is_connected(self) -> bool:
        """Whether an engine has been created."""
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine | None:
        """The engine, if connected."""
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Session factory bound to the engine.

        Raises:
            DatabaseNotConfiguredError: If not connected
        """
        if self._session_factory is None:
            raise DatabaseNotConfiguredError()
        return self._session_factory

    async def connect(self) -> None:
        """Create the engine unless already connected.

        A missing URL is not an error: a warning is logged and the handle
        stays disconnected.

        Raises:
            DatabaseConnectionError: If the engine cannot be created
        """
        if self._engine is not None:
            logfire.info("Already connected to database")
            return

        if not self.settings.database_url:
            logfire.warn("Database URL not found, staying disconnected")
            return

        try:
            engine = create_engine(self.settings)
        except (ArgumentError, ImportError) as e:
            logfire.error("Failed to connect to database", error=str(e))
            raise DatabaseConnectionError(f"Failed to connect to database: {e}") from e

        self._engine = engine
        self._session_factory = create_session_factory(engine)
        logfire.info("Connected to database", dialect=engine.dialect.name)

    async def disconnect(self) -> None:
        """Dispose the engine and its pool. No-op when not connected."""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logfire.info("Disconnected from database")
