"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Response, status
from pydantic import BaseModel, Field

from chatter.application.usecase.user import (
    GetUserRequest,
    GetUserThreadsRequest,
    GetUserThreadsResponse,
    GetUserThreadsUseCase,
    GetUserUseCase,
    SearchUsersRequest,
    SearchUsersResponse,
    SearchUsersUseCase,
    UpsertUserRequest,
    UpsertUserResponse,
    UpsertUserUseCase,
    UserResponse,
)
from chatter.config import Settings
from chatter.domain.value import SortOrder
from chatter.interface.api.revalidation import header_revalidator
from chatter.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpsertUserAPIRequest(BaseModel):
    """API request for saving a profile."""

    username: str = Field(min_length=1, max_length=255)
    name: str = Field(min_length=1, max_length=255)
    bio: str = Field(default="", max_length=1000)
    image: str | None = None
    path: str = "/onboarding"  # Page the profile form was submitted from


@router.get("", response_model=SearchUsersResponse)
async def search_users(
    search_users_use_case: FromDishka[SearchUsersUseCase],
    requester: str = Query(min_length=1, description="External id of the searcher"),
    q: str = Query(default="", description="Username or name substring"),
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1),
    sort: SortOrder = Query(default=SortOrder.DESC),
) -> SearchUsersResponse:
    """Search users other than the requester.

    Example:
        GET /users?requester=user_2abc&q=ali&page=1

    Returns:
        User cards and whether another page exists
    """
    try:
        return await search_users_use_case.execute(
            SearchUsersRequest(
                requester_external_id=requester,
                search_text=q,
                page=page,
                page_size=page_size,
                sort=sort,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "Search users")


@router.put("/{external_id}", response_model=UpsertUserResponse)
async def upsert_user(
    external_id: str,
    request: UpsertUserAPIRequest,
    response: Response,
    upsert_user_use_case: FromDishka[UpsertUserUseCase],
    settings: FromDishka[Settings],
) -> UpsertUserResponse:
    """Create or update the profile of an external identity.

    Args:
        external_id: Identity provider's identifier
        request: Profile fields
        response: Response receiving the revalidation headers
        upsert_user_use_case: Upsert user use case from DI
        settings: Application settings from DI

    Returns:
        The stored profile
    """
    try:
        return await upsert_user_use_case.execute(
            UpsertUserRequest(
                external_id=external_id,
                username=request.username,
                name=request.name,
                bio=request.bio,
                image=request.image,
                path=request.path,
            ),
            revalidate=header_revalidator(response, settings.api.revalidate_header),
        )
    except Exception as e:
        raise to_http_exception(e, "Save profile")


@router.get("/{external_id}", response_model=UserResponse)
async def get_user(
    external_id: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserResponse:
    """Get a profile by external id.

    Raises:
        HTTPException: If the user does not exist
    """
    try:
        user = await get_user_use_case.execute(GetUserRequest(external_id=external_id))
    except Exception as e:
        raise to_http_exception(e, "Get user")

    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User not found: {external_id}",
        )
    return user


@router.get("/{external_id}/threads", response_model=GetUserThreadsResponse)
async def get_user_threads(
    external_id: str,
    get_user_threads_use_case: FromDishka[GetUserThreadsUseCase],
) -> GetUserThreadsResponse:
    """Get a profile with the threads its user started.

    Raises:
        HTTPException: If the user does not exist
    """
    try:
        result = await get_user_threads_use_case.execute(
            GetUserThreadsRequest(external_id=external_id)
        )
    except Exception as e:
        raise to_http_exception(e, "Get user threads")

    if not result:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User not found: {external_id}",
        )
    return result
