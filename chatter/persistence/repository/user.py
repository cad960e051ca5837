"""PostgreSQL implementation of User repository."""

from typing import List, Optional

import logfire
from sqlalchemy import asc, desc, func, or_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from chatter.domain.error import UsernameTakenError
from chatter.domain.model import User
from chatter.domain.repository import UserRepository
from chatter.domain.value import ExternalId, SortOrder, ThreadId, UserId, Username
from chatter.persistence.error import translate_errors
from chatter.persistence.mappers import row_to_user, user_to_dict
from chatter.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, stmt, action: str) -> Optional[User]:
        with translate_errors(action):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    def _search_filter(self, stmt, exclude_external_id: ExternalId, search_text):
        stmt = stmt.where(users_table.c.external_id != exclude_external_id.root)
        if search_text:
            stmt = stmt.where(
                or_(
                    users_table.c.username.icontains(search_text, autoescape=True),
                    users_table.c.name.icontains(search_text, autoescape=True),
                )
            )
        return stmt

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        return await self._find_one(stmt, "fetch user")

    async def find_by_external_id(self, external_id: ExternalId) -> Optional[User]:
        """Find a user by external id."""
        stmt = select(users_table).where(
            users_table.c.external_id == external_id.root
        )
        return await self._find_one(stmt, "fetch user")

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        stmt = select(users_table).where(users_table.c.username == username.root)
        return await self._find_one(stmt, "fetch user")

    async def find_by_ids(self, user_ids: List[UserId]) -> List[User]:
        """Find several users in a single query."""
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        with translate_errors("fetch users"):
            result = await self.session.execute(stmt)
            rows = result.mappings().all()
        return [row_to_user(dict(row)) for row in rows]

    async def search(
        self,
        exclude_external_id: ExternalId,
        search_text: Optional[str] = None,
        sort: SortOrder = SortOrder.DESC,
        limit: int = 20,
        offset: int = 0,
    ) -> List[User]:
        """Search users by username or name."""
        with logfire.span(
            "user_repository.search",
            search_text=search_text,
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            order = desc if sort == SortOrder.DESC else asc
            stmt = self._search_filter(
                select(users_table), exclude_external_id, search_text
            )
            stmt = (
                stmt.order_by(order(users_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )

            with translate_errors("fetch users"):
                result = await self.session.execute(stmt)
                rows = result.mappings().all()

            logfire.info("Found users", count=len(rows))
            return [row_to_user(dict(row)) for row in rows]

    async def count_search(
        self,
        exclude_external_id: ExternalId,
        search_text: Optional[str] = None,
    ) -> int:
        """Count users matching the search filters."""
        stmt = self._search_filter(
            select(func.count()).select_from(users_table),
            exclude_external_id,
            search_text,
        )
        with translate_errors("count users"):
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def save(self, user: User) -> User:
        """Insert the user, or update the row with the same external id.

        The stored thread list and creation time are kept on update.
        """
        with logfire.span(
            "user_repository.save",
            user_id=str(user.id),
            external_id=user.external_id.root,
        ):
            user_dict = user_to_dict(user)
            stmt = insert(users_table).values(**user_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[users_table.c.external_id],
                set_={
                    "username": stmt.excluded.username,
                    "name": stmt.excluded.name,
                    "bio": stmt.excluded.bio,
                    "image": stmt.excluded.image,
                    "onboarded": stmt.excluded.onboarded,
                    "updated_at": stmt.excluded.updated_at,
                },
            ).returning(users_table)

            with translate_errors("create/update user"):
                try:
                    # Savepoint, so a conflict leaves the request transaction usable
                    async with self.session.begin_nested():
                        result = await self.session.execute(stmt)
                        row = result.mappings().one()
                except IntegrityError as e:
                    # Unique username index lost a race with another upsert
                    if "username" not in str(e.orig):
                        raise
                    logfire.warn("Username already taken", username=user.username.root)
                    raise UsernameTakenError(user.username.root) from e

            return row_to_user(dict(row))

    async def append_thread(self, user_id: UserId, thread_id: ThreadId) -> None:
        """Atomically append a thread to the user's thread list."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(
                thread_ids=func.array_append(
                    users_table.c.thread_ids,
                    thread_id,
                    type_=users_table.c.thread_ids.type,
                )
            )
        )
        with translate_errors("link thread to user"):
            await self.session.execute(stmt)
            await self.session.flush()
