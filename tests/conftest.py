"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from chatter.domain.model import Thread, User
from chatter.domain.repository import ThreadRepository, UserRepository
from chatter.domain.value import ExternalId, ThreadId, UserId, Username

BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """A fixed timestamp ``minutes`` after BASE_TIME, for ordering tests."""
    return BASE_TIME + timedelta(minutes=minutes)


async def make_user(
    user_repo: UserRepository,
    username: str = "alice",
    name: str | None = None,
    external_id: str | None = None,
    created_at: datetime | None = None,
) -> User:
    """Store a user directly through the repository."""
    user = User(
        id=UserId(uuid4()),
        external_id=ExternalId(external_id or f"ext_{username}"),
        username=Username(username),
        name=name or username.title(),
        onboarded=True,
        created_at=created_at or BASE_TIME,
        updated_at=created_at or BASE_TIME,
    )
    return await user_repo.save(user)


async def make_thread(
    thread_repo: ThreadRepository,
    author: User,
    text: str = "Hello world",
    parent: Thread | None = None,
    created_at: datetime | None = None,
) -> Thread:
    """Store a thread directly, linking it to its parent if given.

    Does not append top-level threads to the author's thread list.
    """
    thread = Thread(
        id=ThreadId(uuid4()),
        text=text,
        author_id=author.id,
        parent_id=parent.id if parent else None,
        created_at=created_at or BASE_TIME,
    )
    saved = await thread_repo.save(thread)
    if parent:
        await thread_repo.append_child(parent.id, saved.id)
    return saved
