"""User response models."""

from datetime import datetime

from pydantic import BaseModel

from chatter.domain.error import ValidationError
from chatter.domain.model import User
from chatter.domain.value import ExternalId


def parse_external_id(value: str) -> ExternalId:
    """Wrap an external id, turning a blank value into a domain error."""
    try:
        return ExternalId(value)
    except ValueError as e:
        raise ValidationError(f"Invalid external id: {value!r}") from e


class UserResponse(BaseModel):
    """Full user profile."""

    user_id: str
    external_id: str
    username: str
    name: str
    bio: str
    image: str | None
    onboarded: bool
    thread_ids: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            user_id=str(user.id),
            external_id=user.external_id.root,
            username=user.username.root,
            name=user.name,
            bio=user.bio,
            image=user.image,
            onboarded=user.onboarded,
            thread_ids=[str(tid) for tid in user.thread_ids],
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
