"""Search users use case."""

import logfire
from pydantic import BaseModel, Field

from chatter.application.usecase.base import BaseUseCase
from chatter.config import PaginationSettings
from chatter.domain.model import User
from chatter.domain.service import UserService
from chatter.domain.value import PageRequest, PersonType, SortOrder

from .common import parse_external_id


class UserCard(BaseModel):
    """Compact profile shown in search results and suggestions."""

    id: str
    name: str
    username: str
    image_url: str | None
    person_type: PersonType
    href: str  # Profile page the card links to

    @classmethod
    def from_domain(
        cls, user: User, person_type: PersonType = PersonType.USER
    ) -> "UserCard":
        return cls(
            id=user.external_id.root,
            name=user.name,
            username=user.username.root,
            image_url=user.image,
            person_type=person_type,
            href=f"/profile/{user.external_id.root}",
        )


class SearchUsersRequest(BaseModel):
    """Search users request."""

    requester_external_id: str  # Excluded from the results
    search_text: str = ""
    page: int = Field(default=1, ge=1)
    page_size: int | None = Field(default=None, ge=1)  # None uses the configured default
    sort: SortOrder = SortOrder.DESC


class SearchUsersResponse(BaseModel):
    """Search users response."""

    users: list[UserCard]
    total: int
    is_next: bool


class SearchUsersUseCase(BaseUseCase[SearchUsersRequest, SearchUsersResponse]):
    """Use case for finding other users by username or name."""

    def __init__(
        self, user_service: UserService, pagination: PaginationSettings
    ) -> None:
        """Initialize search users use case.

        Args:
            user_service: User domain service
            pagination: Default and maximum page sizes
        """
        self.user_service = user_service
        self.pagination = pagination

    async def execute(self, request: SearchUsersRequest) -> SearchUsersResponse:
        """Execute search users flow.

        Args:
            request: Search users request

        Returns:
            Matching users as cards and whether another page exists
        """
        requester = parse_external_id(request.requester_external_id)
        page_size = min(
            request.page_size or self.pagination.default_page_size,
            self.pagination.max_page_size,
        )
        with logfire.span(
            "search_users.execute",
            requester=requester.root,
            page=request.page,
            page_size=page_size,
        ):
            result = await self.user_service.search(
                requester_external_id=requester,
                search_text=request.search_text,
                page=PageRequest(page=request.page, page_size=page_size),
                sort=request.sort,
            )
            return SearchUsersResponse(
                users=[UserCard.from_domain(user) for user in result.users],
                total=result.total,
                is_next=result.is_next,
            )
