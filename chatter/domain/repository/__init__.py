"""Repository interfaces for Chatter domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from chatter.domain.repository.thread import ThreadRepository
from chatter.domain.repository.unit_of_work import UnitOfWork
from chatter.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ThreadRepository",
    "UnitOfWork",
]
