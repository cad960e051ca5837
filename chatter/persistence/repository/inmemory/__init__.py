"""In-memory repository implementations for testing."""

from .store import InMemoryStore
from .thread import InMemoryThreadRepository
from .unit_of_work import InMemoryUnitOfWork
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryStore",
    "InMemoryThreadRepository",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
]
