"""User use cases."""

from .common import UserResponse
from .get_user import GetUserRequest, GetUserUseCase
from .get_user_threads import (
    GetUserThreadsRequest,
    GetUserThreadsResponse,
    GetUserThreadsUseCase,
)
from .search_users import (
    SearchUsersRequest,
    SearchUsersResponse,
    SearchUsersUseCase,
    UserCard,
)
from .upsert_user import UpsertUserRequest, UpsertUserResponse, UpsertUserUseCase

__all__ = [
    "GetUserRequest",
    "GetUserUseCase",
    "GetUserThreadsRequest",
    "GetUserThreadsResponse",
    "GetUserThreadsUseCase",
    "SearchUsersRequest",
    "SearchUsersResponse",
    "SearchUsersUseCase",
    "UpsertUserRequest",
    "UpsertUserResponse",
    "UpsertUserUseCase",
    "UserCard",
    "UserResponse",
]
