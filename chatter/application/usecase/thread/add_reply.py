"""Add reply use case."""

import logfire
from pydantic import BaseModel

from chatter.application.usecase.base import BaseUseCase
from chatter.application.usecase.common import ThreadResponse, parse_id
from chatter.domain.repository import UnitOfWork
from chatter.domain.service import Revalidate, ThreadService, no_revalidation
from chatter.domain.value import ThreadId, UserId


class AddReplyRequest(BaseModel):
    """Add reply request."""

    thread_id: str  # Thread being replied to
    text: str
    author_id: str
    path: str  # Page to revalidate, usually the thread page


class AddReplyResponse(BaseModel):
    """Add reply response."""

    reply: ThreadResponse


class AddReplyUseCase(BaseUseCase[AddReplyRequest, AddReplyResponse]):
    """Use case for replying to a thread."""

    def __init__(
        self, thread_service: ThreadService, unit_of_work: UnitOfWork
    ) -> None:
        """Initialize add reply use case.

        Args:
            thread_service: Thread domain service
            unit_of_work: Transaction boundary for the two writes
        """
        self.thread_service = thread_service
        self.unit_of_work = unit_of_work

    async def execute(
        self,
        request: AddReplyRequest,
        revalidate: Revalidate = no_revalidation,
    ) -> AddReplyResponse:
        """Execute add reply flow.

        The reply is saved and appended to its parent's children in one
        transaction. A missing parent aborts before anything is written.

        Args:
            request: Add reply request
            revalidate: Called with ``request.path`` after commit

        Returns:
            The stored reply

        Raises:
            ValidationError: If an id is malformed
            NotFoundError: If the parent thread or the author does not exist
        """
        parent_id = ThreadId(parse_id(request.thread_id, "thread"))
        author_id = UserId(parse_id(request.author_id, "user"))

        with logfire.span(
            "add_reply.execute",
            parent_id=str(parent_id),
            author_id=str(author_id),
            path=request.path,
        ):
            async with self.unit_of_work:
                reply = await self.thread_service.add_reply(
                    parent_id=parent_id, text=request.text, author_id=author_id
                )

            revalidate(request.path)
            return AddReplyResponse(reply=ThreadResponse.from_domain(reply))
