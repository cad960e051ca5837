"""Form validation.

Forms are validated before any use case runs; a failing form never reaches
the database.
"""

from pydantic import BaseModel, field_validator

MIN_THREAD_LENGTH = 3


def _check_thread_text(value: str) -> str:
    if len(value) < MIN_THREAD_LENGTH:
        raise ValueError(f"Minimum of {MIN_THREAD_LENGTH} characters")
    return value


class ThreadForm(BaseModel):
    """Form for starting a new thread."""

    thread: str
    account_id: str

    @field_validator("thread")
    @classmethod
    def validate_thread(cls, v: str) -> str:
        return _check_thread_text(v)

    @field_validator("account_id")
    @classmethod
    def validate_account_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Account is required")
        return v


class CommentForm(BaseModel):
    """Form for replying to a thread."""

    thread: str

    @field_validator("thread")
    @classmethod
    def validate_thread(cls, v: str) -> str:
        return _check_thread_text(v)
