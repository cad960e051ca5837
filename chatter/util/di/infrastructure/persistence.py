"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncSession

from chatter.config import Settings
from chatter.domain.repository import ThreadRepository, UnitOfWork, UserRepository
from chatter.persistence.database import Database
from chatter.persistence.repository import (
    PostgresThreadRepository,
    PostgresUnitOfWork,
    PostgresUserRepository,
)
from chatter.util.di.base import ProviderBase
from chatter.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_database(self, settings: Settings) -> AsyncIterator[Database]:
        """Provide the process-wide database, disconnected when the app stops."""
        database = Database(settings)
        await database.connect()
        if database.engine is not None:
            # Instrument SQLAlchemy for observability
            instrument_sqlalchemy(database.engine)
        try:
            yield database
        finally:
            await database.disconnect()

    @provide(scope=Scope.REQUEST)
    async def get_session(self, database: Database) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Use cases commit through the unit of work; anything still pending at
        the end of the request is committed, or rolled back if an exception
        was raised.

        Raises:
            DatabaseNotConfiguredError: If no database URL is configured
        """
        async with database.session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self, session: AsyncSession) -> ThreadRepository:
        """Provide Thread repository."""
        return PostgresThreadRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide unit of work over the request session."""
        return PostgresUnitOfWork(session)
