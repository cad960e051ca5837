"""Unit of work interface.

Groups the writes of one operation into a single transaction. Used as an
async context manager: the block commits on success and rolls back when it
raises.
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Type


class UnitOfWork(ABC):
    """Transaction boundary for a use case."""

    async def __aenter__(self) -> "UnitOfWork":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if exc_type is None:
            await self.commit()
        else:
            await self.rollback()

    @abstractmethod
    async def commit(self) -> None:
        """Make every write since the last commit durable."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard every write since the last commit."""
        pass
