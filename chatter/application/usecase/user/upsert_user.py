"""Upsert user use case."""

import logfire
from pydantic import BaseModel, Field

from chatter.application.usecase.base import BaseUseCase
from chatter.domain.error import ValidationError
from chatter.domain.repository import UnitOfWork
from chatter.domain.service import Revalidate, UserService, no_revalidation
from chatter.domain.value import Username

from .common import UserResponse, parse_external_id

# Only the profile editor renders data that must be refreshed after a save;
# onboarding redirects away instead.
PROFILE_EDIT_PATH = "/profile/edit"


class UpsertUserRequest(BaseModel):
    """Upsert user request."""

    external_id: str = Field(min_length=1, max_length=255)
    username: str = Field(min_length=1, max_length=255)
    name: str = Field(min_length=1, max_length=255)
    bio: str = Field(default="", max_length=1000)
    image: str | None = None
    path: str = "/onboarding"  # Page the profile form was submitted from


class UpsertUserResponse(BaseModel):
    """Upsert user response."""

    user: UserResponse


class UpsertUserUseCase(BaseUseCase[UpsertUserRequest, UpsertUserResponse]):
    """Use case for creating or updating a profile.

    The first save creates the user keyed by external id; later saves update
    the same record. Either way the user ends up onboarded.
    """

    def __init__(self, user_service: UserService, unit_of_work: UnitOfWork) -> None:
        """Initialize upsert user use case.

        Args:
            user_service: User domain service
            unit_of_work: Transaction boundary
        """
        self.user_service = user_service
        self.unit_of_work = unit_of_work

    async def execute(
        self,
        request: UpsertUserRequest,
        revalidate: Revalidate = no_revalidation,
    ) -> UpsertUserResponse:
        """Execute upsert user flow.

        Args:
            request: Upsert user request
            revalidate: Called after commit when the form came from the
                profile editor

        Returns:
            The stored user

        Raises:
            ValidationError: If the external id or username is blank
            UsernameTakenError: If another user owns the username
        """
        external_id = parse_external_id(request.external_id)
        try:
            username = Username(request.username)
        except ValueError as e:
            raise ValidationError(f"Invalid username: {request.username!r}") from e

        with logfire.span(
            "upsert_user.execute",
            external_id=external_id.root,
            username=username.root,
            path=request.path,
        ):
            async with self.unit_of_work:
                user = await self.user_service.upsert_profile(
                    external_id=external_id,
                    username=username,
                    name=request.name,
                    bio=request.bio,
                    image=request.image,
                )

            if request.path == PROFILE_EDIT_PATH:
                revalidate(request.path)

            return UpsertUserResponse(user=UserResponse.from_domain(user))
