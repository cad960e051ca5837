"""In-memory unit of work for testing."""

from chatter.domain.repository import UnitOfWork

from .store import InMemoryStore


class InMemoryUnitOfWork(UnitOfWork):
    """Restores the store to its state at the start of the block on rollback."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()
        self._snapshot = self._store.snapshot()
        self.commits = 0
        self.rollbacks = 0

    async def __aenter__(self) -> "InMemoryUnitOfWork":
        self._snapshot = self._store.snapshot()
        return self

    async def commit(self) -> None:
        self._snapshot = self._store.snapshot()
        self.commits += 1

    async def rollback(self) -> None:
        self._store.restore(self._snapshot)
        self.rollbacks += 1
