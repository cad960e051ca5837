"""PostgreSQL repository implementations."""

from chatter.persistence.repository.thread import PostgresThreadRepository
from chatter.persistence.repository.unit_of_work import PostgresUnitOfWork
from chatter.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresThreadRepository",
    "PostgresUnitOfWork",
]
