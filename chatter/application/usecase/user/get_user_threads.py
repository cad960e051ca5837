"""Get user threads use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from chatter.application.usecase.base import BaseUseCase
from chatter.application.usecase.common import ThreadNodeResponse
from chatter.domain.service import ThreadService, UserService

from .common import UserResponse, parse_external_id


class GetUserThreadsRequest(BaseModel):
    """Get user threads request."""

    external_id: str


class GetUserThreadsResponse(BaseModel):
    """A profile with the threads its user started."""

    user: UserResponse
    threads: list[ThreadNodeResponse]


class GetUserThreadsUseCase(
    BaseUseCase[GetUserThreadsRequest, Optional[GetUserThreadsResponse]]
):
    """Use case for the threads tab of a profile page."""

    def __init__(
        self, user_service: UserService, thread_service: ThreadService
    ) -> None:
        """Initialize get user threads use case.

        Args:
            user_service: User domain service
            thread_service: Thread domain service
        """
        self.user_service = user_service
        self.thread_service = thread_service

    async def execute(
        self, request: GetUserThreadsRequest
    ) -> Optional[GetUserThreadsResponse]:
        """Execute get user threads flow.

        Threads come back in the order the user started them, each with its
        direct replies and every reply with its author.

        Args:
            request: Get user threads request

        Returns:
            The user and their threads, or None if the user does not exist
        """
        external_id = parse_external_id(request.external_id)
        with logfire.span("get_user_threads.execute", external_id=external_id.root):
            user = await self.user_service.get_by_external_id(external_id)
            if not user:
                return None

            nodes = await self.thread_service.get_threads(
                user.thread_ids, reply_depth=1
            )
            return GetUserThreadsResponse(
                user=UserResponse.from_domain(user),
                threads=[ThreadNodeResponse.from_domain(n) for n in nodes],
            )
