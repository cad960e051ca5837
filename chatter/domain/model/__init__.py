"""Domain model entities for Chatter."""

from chatter.domain.model.thread import Thread
from chatter.domain.model.user import User

__all__ = [
    "User",
    "Thread",
]
