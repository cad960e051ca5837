"""Persistence layer errors."""

from contextlib import contextmanager
from typing import Iterator

import logfire
from sqlalchemy.exc import SQLAlchemyError

from chatter.domain.error import RepositoryError
from chatter.util.error import ConfigurationError


class PersistenceError(Exception):
    """Base persistence error."""

    pass


class DatabaseNotConfiguredError(PersistenceError, ConfigurationError):
    """Raised when a session is requested but no database is connected."""

    def __init__(self) -> None:
        super().__init__("DATABASE__URL", "Database is not connected")


class DatabaseConnectionError(PersistenceError):
    """Raised when the database engine cannot be created."""

    pass


@contextmanager
def translate_errors(action: str) -> Iterator[None]:
    """Re-raise SQLAlchemy errors as ``RepositoryError``.

    Args:
        action: What was being attempted, e.g. "fetch user"

    Raises:
        RepositoryError: Wrapping the driver error
    """
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error(
            "Database operation failed",
            action=action,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise RepositoryError(action, e) from e
