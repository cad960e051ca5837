"""Get thread use case."""

from typing import Optional

from pydantic import BaseModel

from chatter.application.usecase.base import BaseUseCase
from chatter.application.usecase.common import ThreadNodeResponse, parse_id
from chatter.domain.service import ThreadService
from chatter.domain.value import ThreadId


class GetThreadRequest(BaseModel):
    """Get thread request."""

    thread_id: str


class GetThreadResponse(BaseModel):
    """Get thread response."""

    thread: ThreadNodeResponse


class GetThreadUseCase(BaseUseCase[GetThreadRequest, Optional[GetThreadResponse]]):
    """Use case for a thread page: the thread and two levels of replies."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: GetThreadRequest) -> Optional[GetThreadResponse]:
        """Execute get thread flow.

        Args:
            request: Get thread request

        Returns:
            The populated thread if found, None otherwise
        """
        thread_id = ThreadId(parse_id(request.thread_id, "thread"))
        node = await self.thread_service.get_thread_tree(thread_id)
        if not node:
            return None
        return GetThreadResponse(thread=ThreadNodeResponse.from_domain(node))
