"""Create thread use case."""

import logfire
from pydantic import BaseModel

from chatter.application.usecase.base import BaseUseCase
from chatter.application.usecase.common import ThreadResponse, parse_id
from chatter.domain.repository import UnitOfWork
from chatter.domain.service import Revalidate, ThreadService, no_revalidation
from chatter.domain.value import UserId


class CreateThreadRequest(BaseModel):
    """Create thread request."""

    text: str
    author_id: str  # Internal user ID of the author
    community_id: str | None = None  # Accepted but always stored as null
    path: str = "/"  # Page to revalidate once the thread is stored


class CreateThreadResponse(BaseModel):
    """Create thread response."""

    thread: ThreadResponse


class CreateThreadUseCase(BaseUseCase[CreateThreadRequest, CreateThreadResponse]):
    """Use case for starting a new top-level thread."""

    def __init__(
        self, thread_service: ThreadService, unit_of_work: UnitOfWork
    ) -> None:
        """Initialize create thread use case.

        Args:
            thread_service: Thread domain service
            unit_of_work: Transaction boundary for the two writes
        """
        self.thread_service = thread_service
        self.unit_of_work = unit_of_work

    async def execute(
        self,
        request: CreateThreadRequest,
        revalidate: Revalidate = no_revalidation,
    ) -> CreateThreadResponse:
        """Execute create thread flow.

        Steps:
        1. Save the thread and append it to the author's thread list
        2. Commit both writes together
        3. Revalidate the requested path

        Args:
            request: Create thread request
            revalidate: Called with ``request.path`` after commit

        Returns:
            The stored thread

        Raises:
            ValidationError: If the author id is malformed
            NotFoundError: If the author does not exist
        """
        author_id = UserId(parse_id(request.author_id, "user"))

        with logfire.span(
            "create_thread.execute", author_id=str(author_id), path=request.path
        ):
            if request.community_id:
                logfire.info(
                    "Ignoring community for new thread",
                    community_id=request.community_id,
                )

            async with self.unit_of_work:
                thread = await self.thread_service.create_thread(
                    text=request.text, author_id=author_id
                )

            revalidate(request.path)
            return CreateThreadResponse(thread=ThreadResponse.from_domain(thread))
