"""Unit tests for DomainModel.evolve."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from chatter.domain.model import User
from chatter.domain.value import ExternalId, ThreadId, UserId, Username


def _user() -> User:
    return User(
        id=UserId(uuid4()),
        external_id=ExternalId("user_1"),
        username=Username("ada"),
        name="Ada",
    )


def test_evolve_applies_changes_and_keeps_original():
    user = _user()
    thread_id = ThreadId(uuid4())

    updated = user.evolve(thread_ids=[thread_id], onboarded=True)

    assert updated.thread_ids == [thread_id]
    assert updated.onboarded is True
    assert updated.id == user.id
    assert user.thread_ids == []


def test_evolve_validates_changes():
    with pytest.raises(ValidationError):
        _user().evolve(name="x" * 256)


def test_evolve_normalizes_value_objects():
    updated = _user().evolve(username="GRACE")

    assert updated.username == Username("grace")
