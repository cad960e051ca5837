"""PostgreSQL implementation of Thread repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from chatter.domain.model import Thread
from chatter.domain.repository import ThreadRepository
from chatter.domain.value import ThreadId, UserId
from chatter.persistence.error import translate_errors
from chatter.persistence.mappers import row_to_thread, thread_to_dict
from chatter.persistence.tables import threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        with logfire.span("thread_repository.find_by_id", thread_id=str(thread_id)):
            stmt = select(threads_table).where(threads_table.c.id == thread_id)
            with translate_errors("fetch thread"):
                result = await self.session.execute(stmt)
                row = result.fetchone()

            if not row:
                logfire.warn("Thread not found", thread_id=str(thread_id))
                return None

            return row_to_thread(row._asdict())

    async def find_by_ids(
        self,
        thread_ids: List[ThreadId],
        exclude_author_id: Optional[UserId] = None,
    ) -> List[Thread]:
        """Find several threads, preserving the order of ``thread_ids``."""
        if not thread_ids:
            return []

        with logfire.span(
            "thread_repository.find_by_ids",
            count=len(thread_ids),
            exclude_author_id=str(exclude_author_id) if exclude_author_id else None,
        ):
            stmt = select(threads_table).where(threads_table.c.id.in_(thread_ids))
            if exclude_author_id is not None:
                stmt = stmt.where(threads_table.c.author_id != exclude_author_id)

            with translate_errors("fetch threads"):
                result = await self.session.execute(stmt)
                rows = result.fetchall()

            by_id = {row.id: row_to_thread(row._asdict()) for row in rows}
            return [by_id[tid] for tid in dict.fromkeys(thread_ids) if tid in by_id]

    async def find_top_level(self, limit: int = 20, offset: int = 0) -> List[Thread]:
        """Find threads without a parent, newest first."""
        with logfire.span(
            "thread_repository.find_top_level", limit=limit, offset=offset
        ):
            stmt = (
                select(threads_table)
                .where(threads_table.c.parent_id.is_(None))
                .order_by(desc(threads_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )
            with translate_errors("fetch threads"):
                result = await self.session.execute(stmt)
                rows = result.fetchall()

            logfire.info("Found threads", count=len(rows))
            return [row_to_thread(row._asdict()) for row in rows]

    async def count_top_level(self) -> int:
        """Count threads without a parent."""
        stmt = (
            select(func.count())
            .select_from(threads_table)
            .where(threads_table.c.parent_id.is_(None))
        )
        with translate_errors("count threads"):
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def find_by_author(self, author_id: UserId) -> List[Thread]:
        """Find every thread written by a user, newest first."""
        stmt = (
            select(threads_table)
            .where(threads_table.c.author_id == author_id)
            .order_by(desc(threads_table.c.created_at))
        )
        with translate_errors("fetch threads"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_thread(row._asdict()) for row in rows]

    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update)."""
        with logfire.span(
            "thread_repository.save",
            thread_id=str(thread.id),
            parent_id=str(thread.parent_id) if thread.parent_id else None,
        ):
            thread_dict = thread_to_dict(thread)

            with translate_errors("save thread"):
                exists = await self.session.scalar(
                    select(func.count())
                    .select_from(threads_table)
                    .where(threads_table.c.id == thread.id)
                )
                if exists:
                    logfire.info("Updating existing thread", thread_id=str(thread.id))
                    stmt = (
                        threads_table.update()
                        .where(threads_table.c.id == thread.id)
                        .values(**thread_dict)
                    )
                else:
                    logfire.info("Inserting new thread", thread_id=str(thread.id))
                    stmt = threads_table.insert().values(**thread_dict)

                await self.session.execute(stmt)
                await self.session.flush()

            return thread

    async def append_child(self, parent_id: ThreadId, child_id: ThreadId) -> None:
        """Atomically append a reply to a thread's child list."""
        stmt = (
            threads_table.update()
            .where(threads_table.c.id == parent_id)
            .values(
                children_ids=func.array_append(
                    threads_table.c.children_ids,
                    child_id,
                    type_=threads_table.c.children_ids.type,
                )
            )
        )
        with translate_errors("link reply to thread"):
            await self.session.execute(stmt)
            await self.session.flush()
