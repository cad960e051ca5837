"""Interface layer errors and their HTTP translation."""

import logfire
from fastapi import HTTPException, status

from chatter.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    NotFoundError,
    RepositoryError,
    ValidationError,
)
from chatter.persistence.error import DatabaseNotConfiguredError


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """Translate an error raised by a use case into an HTTP error.

    Args:
        error: The raised error
        action: What the route was doing, for the log line

    Returns:
        HTTPException with the matching status code
    """
    if isinstance(error, ValidationError):
        logfire.warn(f"{action}: invalid request", error=str(error))
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(error)
        )
    if isinstance(error, NotFoundError):
        logfire.warn(f"{action}: not found", error=str(error))
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, BusinessRuleViolationError):
        logfire.warn(f"{action}: rule violated", error=str(error))
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, DatabaseNotConfiguredError):
        logfire.error(f"{action}: database not configured", error=str(error))
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(error)
        )
    if isinstance(error, (RepositoryError, DomainError)):
        logfire.error(f"{action}: failed", error=str(error))
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to {action.lower()}",
        )
    logfire.error(
        f"Unexpected error: {action}", error=str(error), error_type=type(error).__name__
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action.lower()}",
    )
