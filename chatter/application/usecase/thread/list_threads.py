"""List threads use case."""

import logfire
from pydantic import BaseModel, Field

from chatter.application.usecase.base import BaseUseCase
from chatter.application.usecase.common import ThreadNodeResponse
from chatter.config import PaginationSettings
from chatter.domain.service import ThreadService
from chatter.domain.value import PageRequest


class ListThreadsRequest(BaseModel):
    """List threads request."""

    page: int = Field(default=1, ge=1)
    page_size: int | None = Field(default=None, ge=1)  # None uses the configured default


class ListThreadsResponse(BaseModel):
    """List threads response."""

    threads: list[ThreadNodeResponse]
    total: int
    is_next: bool


class ListThreadsUseCase(BaseUseCase[ListThreadsRequest, ListThreadsResponse]):
    """Use case for the feed of top-level threads."""

    def __init__(
        self, thread_service: ThreadService, pagination: PaginationSettings
    ) -> None:
        """Initialize list threads use case.

        Args:
            thread_service: Thread domain service
            pagination: Default and maximum page sizes
        """
        self.thread_service = thread_service
        self.pagination = pagination

    async def execute(self, request: ListThreadsRequest) -> ListThreadsResponse:
        """Execute list threads flow.

        Args:
            request: Page to list; oversized pages are capped

        Returns:
            Threads newest first, each with its author and direct replies
        """
        page_size = min(
            request.page_size or self.pagination.default_page_size,
            self.pagination.max_page_size,
        )
        with logfire.span(
            "list_threads.execute", page=request.page, page_size=page_size
        ):
            result = await self.thread_service.list_top_level(
                PageRequest(page=request.page, page_size=page_size)
            )
            return ListThreadsResponse(
                threads=[ThreadNodeResponse.from_domain(n) for n in result.threads],
                total=result.total,
                is_next=result.is_next,
            )
