"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class UsernameTakenError(BusinessRuleViolationError):
    """Raised when a username already belongs to another user."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username already taken: {username}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class RepositoryError(DomainError):
    """Raised when the underlying storage fails a read or write.

    Wraps the storage error with a description of what was being attempted.
    """

    def __init__(self, action: str, cause: Exception | str):
        self.action = action
        self.cause = cause
        super().__init__(f"Failed to {action}: {cause}")
