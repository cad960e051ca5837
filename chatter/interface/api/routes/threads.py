"""Thread routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Response, status
from pydantic import BaseModel

from chatter.application.usecase.common import ThreadResponse
from chatter.application.usecase.thread import (
    AddReplyRequest,
    AddReplyResponse,
    AddReplyUseCase,
    CreateThreadRequest,
    CreateThreadUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    ListThreadsRequest,
    ListThreadsResponse,
    ListThreadsUseCase,
)
from chatter.application.validation import CommentForm, ThreadForm
from chatter.config import Settings
from chatter.interface.api.revalidation import header_revalidator
from chatter.interface.error import to_http_exception

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


class CreateThreadAPIRequest(ThreadForm):
    """API request for starting a thread."""

    path: str = "/"  # Page the form was submitted from


class CreateThreadAPIResponse(BaseModel):
    """API response for a new thread."""

    thread: ThreadResponse
    redirect_to: str  # Where the form navigates after submitting


class AddReplyAPIRequest(CommentForm):
    """API request for replying to a thread."""

    account_id: str  # Internal user ID of the author
    path: str | None = None  # Defaults to the thread page


@router.post(
    "",
    response_model=CreateThreadAPIResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_thread(
    request: CreateThreadAPIRequest,
    response: Response,
    create_thread_use_case: FromDishka[CreateThreadUseCase],
    settings: FromDishka[Settings],
) -> CreateThreadAPIResponse:
    """Start a new top-level thread.

    Args:
        request: Thread form
        response: Response receiving the revalidation headers
        create_thread_use_case: Create thread use case from DI
        settings: Application settings from DI

    Returns:
        Created thread and the page to navigate to
    """
    try:
        result = await create_thread_use_case.execute(
            CreateThreadRequest(
                text=request.thread,
                author_id=request.account_id,
                path=request.path,
            ),
            revalidate=header_revalidator(response, settings.api.revalidate_header),
        )
    except Exception as e:
        raise to_http_exception(e, "Create thread")

    return CreateThreadAPIResponse(thread=result.thread, redirect_to="/")


@router.get("", response_model=ListThreadsResponse)
async def list_threads(
    list_threads_use_case: FromDishka[ListThreadsUseCase],
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1),
) -> ListThreadsResponse:
    """List top-level threads, newest first.

    Args:
        list_threads_use_case: List threads use case from DI
        page: Page number, starting at 1
        page_size: Threads per page

    Returns:
        Threads with authors and direct replies, and whether more exist
    """
    try:
        return await list_threads_use_case.execute(
            ListThreadsRequest(page=page, page_size=page_size)
        )
    except Exception as e:
        raise to_http_exception(e, "List threads")


@router.get("/{thread_id}", response_model=GetThreadResponse)
async def get_thread(
    thread_id: UUID,
    get_thread_use_case: FromDishka[GetThreadUseCase],
) -> GetThreadResponse:
    """Get a thread with two levels of replies.

    Args:
        thread_id: Thread UUID
        get_thread_use_case: Get thread use case from DI

    Returns:
        The populated thread

    Raises:
        HTTPException: If the thread does not exist
    """
    try:
        result = await get_thread_use_case.execute(
            GetThreadRequest(thread_id=str(thread_id))
        )
    except Exception as e:
        raise to_http_exception(e, "Get thread")

    if not result:
        logfire.warn("Thread not found", thread_id=str(thread_id))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Thread not found: {thread_id}",
        )
    return result


@router.post(
    "/{thread_id}/replies",
    response_model=AddReplyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_reply(
    thread_id: UUID,
    request: AddReplyAPIRequest,
    response: Response,
    add_reply_use_case: FromDishka[AddReplyUseCase],
    settings: FromDishka[Settings],
) -> AddReplyResponse:
    """Reply to a thread.

    Args:
        thread_id: Thread being replied to
        request: Comment form plus the author
        response: Response receiving the revalidation headers
        add_reply_use_case: Add reply use case from DI
        settings: Application settings from DI

    Returns:
        The stored reply
    """
    try:
        return await add_reply_use_case.execute(
            AddReplyRequest(
                thread_id=str(thread_id),
                text=request.thread,
                author_id=request.account_id,
                path=request.path or f"/thread/{thread_id}",
            ),
            revalidate=header_revalidator(response, settings.api.revalidate_header),
        )
    except Exception as e:
        raise to_http_exception(e, "Add reply")
