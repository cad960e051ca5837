"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from chatter.domain.model.user import User
from chatter.domain.value import ExternalId, SortOrder, ThreadId, UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_external_id(self, external_id: ExternalId) -> Optional[User]:
        """Find a user by the identifier of their external identity.

        Args:
            external_id: Identity provider's identifier for the user

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their (lowercase) username.

        Args:
            username: The username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: List[UserId]) -> List[User]:
        """Find several users in a single query.

        Args:
            user_ids: User IDs to look up; unknown IDs are skipped

        Returns:
            Users found, in no particular order
        """
        pass

    @abstractmethod
    async def search(
        self,
        exclude_external_id: ExternalId,
        search_text: Optional[str] = None,
        sort: SortOrder = SortOrder.DESC,
        limit: int = 20,
        offset: int = 0,
    ) -> List[User]:
        """Search users by username or name.

        Args:
            exclude_external_id: External id of the requesting user, never returned
            search_text: Case-insensitive substring to match against
                username or name (None or blank matches everyone)
            sort: Creation-time sort direction
            limit: Maximum number of users to return
            offset: Number of users to skip

        Returns:
            Matching users
        """
        pass

    @abstractmethod
    async def count_search(
        self,
        exclude_external_id: ExternalId,
        search_text: Optional[str] = None,
    ) -> int:
        """Count users matched by ``search`` with the same filters.

        Args:
            exclude_external_id: External id of the requesting user
            search_text: Case-insensitive substring filter

        Returns:
            Total number of matching users
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update), keyed by external id.

        The stored thread list is never overwritten by an update; use
        ``append_thread`` to extend it.

        Args:
            user: The user to save

        Returns:
            The stored user
        """
        pass

    @abstractmethod
    async def append_thread(self, user_id: UserId, thread_id: ThreadId) -> None:
        """Atomically append a thread to the user's thread list.

        Args:
            user_id: Author of the thread
            thread_id: The new top-level thread
        """
        pass
