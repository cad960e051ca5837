"""In-memory user repository for testing."""

from typing import List, Optional

from chatter.domain.error import UsernameTakenError
from chatter.domain.model import User
from chatter.domain.repository import UserRepository
from chatter.domain.value import ExternalId, SortOrder, ThreadId, UserId, Username

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _users(self) -> dict[UserId, User]:
        return self._store.users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_external_id(self, external_id: ExternalId) -> Optional[User]:
        """Find a user by external id."""
        for user in self._users.values():
            if user.external_id == external_id:
                return user
        return None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_by_ids(self, user_ids: List[UserId]) -> List[User]:
        """Find several users."""
        return [self._users[uid] for uid in dict.fromkeys(user_ids) if uid in self._users]

    def _matching(
        self, exclude_external_id: ExternalId, search_text: Optional[str]
    ) -> List[User]:
        users = [u for u in self._users.values() if u.external_id != exclude_external_id]
        if search_text:
            needle = search_text.lower()
            users = [
                u
                for u in users
                if needle in u.username.root.lower() or needle in u.name.lower()
            ]
        return users

    async def search(
        self,
        exclude_external_id: ExternalId,
        search_text: Optional[str] = None,
        sort: SortOrder = SortOrder.DESC,
        limit: int = 20,
        offset: int = 0,
    ) -> List[User]:
        """Search users by username or name."""
        users = self._matching(exclude_external_id, search_text)
        users.sort(key=lambda u: u.created_at, reverse=sort == SortOrder.DESC)
        return users[offset : offset + limit]

    async def count_search(
        self,
        exclude_external_id: ExternalId,
        search_text: Optional[str] = None,
    ) -> int:
        """Count users matching the search filters."""
        return len(self._matching(exclude_external_id, search_text))

    async def save(self, user: User) -> User:
        """Insert or update the user keyed by external id."""
        owner = await self.find_by_username(user.username)
        if owner and owner.external_id != user.external_id:
            raise UsernameTakenError(user.username.root)

        existing = await self.find_by_external_id(user.external_id)
        if existing:
            # Identity, thread list and creation time stay as stored
            user = user.evolve(
                id=existing.id,
                thread_ids=existing.thread_ids,
                created_at=existing.created_at,
            )
        self._users[user.id] = user
        return user

    async def append_thread(self, user_id: UserId, thread_id: ThreadId) -> None:
        """Append a thread to the user's thread list."""
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.evolve(
                thread_ids=[*user.thread_ids, thread_id]
            )
