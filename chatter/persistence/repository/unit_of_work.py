"""PostgreSQL unit of work backed by the request session."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from chatter.domain.repository import UnitOfWork
from chatter.persistence.error import translate_errors


class PostgresUnitOfWork(UnitOfWork):
    """Commits or rolls back the shared request session.

    Repositories of the same request write through this session, so every
    write made inside the ``async with`` block lands in one transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        with translate_errors("commit transaction"):
            await self.session.commit()
        logfire.debug("Transaction committed")

    async def rollback(self) -> None:
        await self.session.rollback()
        logfire.warn("Transaction rolled back")
