"""Get user use case."""

from typing import Optional

from pydantic import BaseModel

from chatter.application.usecase.base import BaseUseCase
from chatter.domain.service import UserService

from .common import UserResponse, parse_external_id


class GetUserRequest(BaseModel):
    """Get user request."""

    external_id: str


class GetUserUseCase(BaseUseCase[GetUserRequest, Optional[UserResponse]]):
    """Use case for looking up a profile by external id."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> Optional[UserResponse]:
        """Execute get user flow.

        Args:
            request: Get user request

        Returns:
            The user if found, None otherwise
        """
        user = await self.user_service.get_by_external_id(
            parse_external_id(request.external_id)
        )
        return UserResponse.from_domain(user) if user else None
