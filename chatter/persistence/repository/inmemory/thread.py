"""In-memory thread repository for testing."""

from typing import List, Optional

from chatter.domain.model import Thread
from chatter.domain.repository import ThreadRepository
from chatter.domain.value import ThreadId, UserId

from .store import InMemoryStore


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _threads(self) -> dict[ThreadId, Thread]:
        return self._store.threads

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        return self._threads.get(thread_id)

    async def find_by_ids(
        self,
        thread_ids: List[ThreadId],
        exclude_author_id: Optional[UserId] = None,
    ) -> List[Thread]:
        """Find several threads in the order given."""
        threads = [
            self._threads[tid] for tid in dict.fromkeys(thread_ids) if tid in self._threads
        ]
        if exclude_author_id is not None:
            threads = [t for t in threads if t.author_id != exclude_author_id]
        return threads

    def _top_level(self) -> List[Thread]:
        return [t for t in self._threads.values() if t.parent_id is None]

    async def find_top_level(self, limit: int = 20, offset: int = 0) -> List[Thread]:
        """Find threads without a parent, newest first."""
        threads = self._top_level()
        threads.sort(key=lambda t: t.created_at, reverse=True)
        return threads[offset : offset + limit]

    async def count_top_level(self) -> int:
        """Count threads without a parent."""
        return len(self._top_level())

    async def find_by_author(self, author_id: UserId) -> List[Thread]:
        """Find every thread by an author, newest first."""
        threads = [t for t in self._threads.values() if t.author_id == author_id]
        threads.sort(key=lambda t: t.created_at, reverse=True)
        return threads

    async def save(self, thread: Thread) -> Thread:
        """Save or update a thread."""
        self._threads[thread.id] = thread
        return thread

    async def append_child(self, parent_id: ThreadId, child_id: ThreadId) -> None:
        """Append a reply to a thread's child list."""
        parent = self._threads.get(parent_id)
        if parent:
            self._threads[parent_id] = parent.evolve(
                children_ids=[*parent.children_ids, child_id]
            )
