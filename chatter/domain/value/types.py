"""Domain value objects for Chatter.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import Field, field_validator

from chatter.domain.value.common import RootValueObject, ValueObject


class SortOrder(str, Enum):
    """Sort direction for creation-time ordering."""

    ASC = "asc"
    DESC = "desc"


class PersonType(str, Enum):
    """Kind of profile shown on a user card."""

    USER = "User"
    COMMUNITY = "Community"


class ExternalId(RootValueObject[str]):
    """Identifier assigned to a user by the external identity provider.

    Immutable once the user record exists; profile upserts are keyed by it.
    """

    @field_validator("root")
    @classmethod
    def validate_external_id(cls, v: str) -> str:
        """Validate external id is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("External id must be 1-255 characters")
        return v


class Username(RootValueObject[str]):
    """Public username.

    Always normalized to lowercase so that uniqueness is case-insensitive.
    """

    @field_validator("root")
    @classmethod
    def normalize_username(cls, v: str) -> str:
        """Lowercase the username and validate its length."""
        v = v.strip().lower()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Username must be 1-255 characters")
        return v


class PageRequest(ValueObject):
    """One page of a skip/limit listing.

    Pages are numbered from 1.
    """

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1)

    @property
    def offset(self) -> int:
        """Number of records skipped before this page."""
        return (self.page - 1) * self.page_size

    def has_next(self, total: int, returned: int) -> bool:
        """Whether records remain after this page.

        Args:
            total: Number of records matching the query
            returned: Number of records on this page

        Returns:
            True iff total > offset + returned
        """
        return total > self.offset + returned
