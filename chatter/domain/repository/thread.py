"""Thread repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from chatter.domain.model.thread import Thread
from chatter.domain.value import ThreadId, UserId


class ThreadRepository(ABC):
    """Repository for Thread aggregate.

    Defines the contract for thread persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID.

        Args:
            thread_id: The thread's unique identifier

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(
        self,
        thread_ids: List[ThreadId],
        exclude_author_id: Optional[UserId] = None,
    ) -> List[Thread]:
        """Find several threads in a single query.

        Args:
            thread_ids: Thread IDs to look up; unknown IDs are skipped
            exclude_author_id: Drop threads written by this user

        Returns:
            Threads found, in the order of ``thread_ids``
        """
        pass

    @abstractmethod
    async def find_top_level(self, limit: int = 20, offset: int = 0) -> List[Thread]:
        """Find threads without a parent, newest first.

        Args:
            limit: Maximum number of threads to return
            offset: Number of threads to skip

        Returns:
            Top-level threads
        """
        pass

    @abstractmethod
    async def count_top_level(self) -> int:
        """Count threads without a parent.

        Returns:
            Total number of top-level threads
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Thread]:
        """Find every thread (top-level or reply) written by a user.

        Args:
            author_id: The author's user ID

        Returns:
            Threads by the author, newest first
        """
        pass

    @abstractmethod
    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update).

        Args:
            thread: The thread to save

        Returns:
            The saved thread
        """
        pass

    @abstractmethod
    async def append_child(self, parent_id: ThreadId, child_id: ThreadId) -> None:
        """Atomically append a reply to a thread's child list.

        Args:
            parent_id: The thread being replied to
            child_id: The reply
        """
        pass
