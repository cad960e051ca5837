"""Shared in-memory storage for testing."""

from dataclasses import dataclass, field

from chatter.domain.model import Thread, User
from chatter.domain.value import ThreadId, UserId


@dataclass
class InMemoryStore:
    """Tables of the in-memory repositories.

    One store is shared by every repository of a container so that a thread
    saved by one request is visible to the next.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    threads: dict[ThreadId, Thread] = field(default_factory=dict)

    def snapshot(self) -> "InMemoryStore":
        # Models are frozen, so copying the dicts is enough
        return InMemoryStore(users=dict(self.users), threads=dict(self.threads))

    def restore(self, snapshot: "InMemoryStore") -> None:
        self.users = dict(snapshot.users)
        self.threads = dict(snapshot.threads)
