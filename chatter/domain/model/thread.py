"""Thread aggregate root.

Threads are the only content type. A thread without a parent starts a
conversation; a thread with a parent is a reply to it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from chatter.domain.model.common import DomainModel
from chatter.domain.value import CommunityId, ThreadId, UserId, utcnow


class Thread(DomainModel):
    """Thread aggregate root.

    Parent and child references mirror each other: a reply's ``parent_id``
    names the thread whose ``children_ids`` lists the reply.
    """

    id: ThreadId
    text: str = Field(min_length=1)
    author_id: UserId
    parent_id: Optional[ThreadId] = None
    children_ids: list[ThreadId] = Field(default_factory=list)
    community_id: Optional[CommunityId] = None
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def is_top_level(self) -> bool:
        """Whether this thread starts a conversation."""
        return self.parent_id is None
