"""User aggregate root.

A user is created the first time its profile is saved and is afterwards
updated in place, keyed by the identifier of the external identity provider.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from chatter.domain.model.common import DomainModel
from chatter.domain.value import ExternalId, ThreadId, UserId, Username, utcnow


class User(DomainModel):
    """User aggregate root.

    ``thread_ids`` is the ordered, append-only list of top-level threads the
    user has started. Replies are linked from their parent thread instead.
    """

    id: UserId
    external_id: ExternalId
    username: Username
    name: str = Field(max_length=255)
    bio: str = Field(default="", max_length=1000)
    image: Optional[str] = None
    onboarded: bool = False
    thread_ids: list[ThreadId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
