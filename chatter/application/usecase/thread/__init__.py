"""Thread use cases."""

from .add_reply import AddReplyRequest, AddReplyResponse, AddReplyUseCase
from .create_thread import (
    CreateThreadRequest,
    CreateThreadResponse,
    CreateThreadUseCase,
)
from .get_activity import GetActivityRequest, GetActivityResponse, GetActivityUseCase
from .get_thread import GetThreadRequest, GetThreadResponse, GetThreadUseCase
from .list_threads import ListThreadsRequest, ListThreadsResponse, ListThreadsUseCase

__all__ = [
    "AddReplyRequest",
    "AddReplyResponse",
    "AddReplyUseCase",
    "CreateThreadRequest",
    "CreateThreadResponse",
    "CreateThreadUseCase",
    "GetActivityRequest",
    "GetActivityResponse",
    "GetActivityUseCase",
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
    "ListThreadsRequest",
    "ListThreadsResponse",
    "ListThreadsUseCase",
]
