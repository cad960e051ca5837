"""Get activity use case."""

import logfire
from pydantic import BaseModel

from chatter.application.usecase.base import BaseUseCase
from chatter.application.usecase.common import ThreadNodeResponse, parse_id
from chatter.domain.service import ThreadService
from chatter.domain.value import UserId


class GetActivityRequest(BaseModel):
    """Get activity request."""

    user_id: str


class GetActivityResponse(BaseModel):
    """Get activity response."""

    replies: list[ThreadNodeResponse]


class GetActivityUseCase(BaseUseCase[GetActivityRequest, GetActivityResponse]):
    """Use case for the replies other users left on a user's threads."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get activity use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: GetActivityRequest) -> GetActivityResponse:
        """Execute get activity flow.

        Args:
            request: Get activity request

        Returns:
            Replies newest first, each with its author
        """
        user_id = UserId(parse_id(request.user_id, "user"))
        with logfire.span("get_activity.execute", user_id=str(user_id)):
            nodes = await self.thread_service.get_activity(user_id)
            return GetActivityResponse(
                replies=[ThreadNodeResponse.from_domain(n) for n in nodes]
            )
