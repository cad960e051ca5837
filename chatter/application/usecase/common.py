"""Response models shared by thread and user use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from chatter.domain.error import ValidationError
from chatter.domain.model import Thread
from chatter.domain.service import AuthorSummary, ThreadNode


def parse_id(value: str, resource: str) -> UUID:
    """Parse an identifier received as a string.

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid {resource} id: {value}") from e


class AuthorResponse(BaseModel):
    """Author shown next to a thread."""

    user_id: str
    external_id: str
    name: str
    username: str
    image: str | None

    @classmethod
    def from_domain(cls, author: AuthorSummary) -> "AuthorResponse":
        return cls(
            user_id=str(author.user_id),
            external_id=author.external_id.root,
            name=author.name,
            username=author.username.root,
            image=author.image,
        )


class ThreadResponse(BaseModel):
    """A stored thread with its references left unresolved."""

    thread_id: str
    text: str
    author_id: str
    parent_id: str | None
    children_ids: list[str]
    community_id: str | None
    created_at: datetime

    @classmethod
    def from_domain(cls, thread: Thread) -> "ThreadResponse":
        return cls(
            thread_id=str(thread.id),
            text=thread.text,
            author_id=str(thread.author_id),
            parent_id=str(thread.parent_id) if thread.parent_id else None,
            children_ids=[str(cid) for cid in thread.children_ids],
            community_id=str(thread.community_id) if thread.community_id else None,
            created_at=thread.created_at,
        )


class ThreadNodeResponse(BaseModel):
    """Populated thread for API responses.

    Recursive structure mirroring the domain ``ThreadNode``. ``reply_count``
    counts every reply, including those not populated into ``children``.
    """

    thread_id: str
    text: str
    parent_id: str | None
    community_id: str | None
    created_at: datetime
    author: AuthorResponse | None
    reply_count: int
    children: list["ThreadNodeResponse"]

    @classmethod
    def from_domain(cls, node: ThreadNode) -> "ThreadNodeResponse":
        """Convert domain ThreadNode to response model.

        Args:
            node: Domain thread node

        Returns:
            API response model with children recursively converted
        """
        thread = node.thread
        return cls(
            thread_id=str(thread.id),
            text=thread.text,
            parent_id=str(thread.parent_id) if thread.parent_id else None,
            community_id=str(thread.community_id) if thread.community_id else None,
            created_at=thread.created_at,
            author=AuthorResponse.from_domain(node.author) if node.author else None,
            reply_count=len(thread.children_ids),
            children=[cls.from_domain(child) for child in node.children],
        )
