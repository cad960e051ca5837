"""Domain value objects for Chatter."""

from chatter.domain.value.common import utcnow
from chatter.domain.value.identifiers import CommunityId, ThreadId, UserId
from chatter.domain.value.types import (
    ExternalId,
    PageRequest,
    PersonType,
    SortOrder,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "ThreadId",
    "CommunityId",
    # Types
    "ExternalId",
    "Username",
    "SortOrder",
    "PersonType",
    "PageRequest",
    "utcnow",
]
