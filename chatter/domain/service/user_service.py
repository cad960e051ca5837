"""User domain service."""

from dataclasses import dataclass
from typing import Optional
from uuid import uuid4

import logfire

from chatter.domain.error import NotFoundError, UsernameTakenError
from chatter.domain.model import User
from chatter.domain.repository import UserRepository
from chatter.domain.value import (
    ExternalId,
    PageRequest,
    SortOrder,
    ThreadId,
    UserId,
    Username,
    utcnow,
)


@dataclass
class AuthorSummary:
    """The slice of a user shown next to their threads."""

    user_id: UserId
    external_id: ExternalId
    name: str
    username: Username
    image: Optional[str]

    @classmethod
    def from_user(cls, user: User) -> "AuthorSummary":
        return cls(
            user_id=user.id,
            external_id=user.external_id,
            name=user.name,
            username=user.username,
            image=user.image,
        )


@dataclass
class UserPage:
    """One page of a user search."""

    users: list[User]
    total: int
    is_next: bool


class UserService:
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_external_id(self, external_id: ExternalId) -> User | None:
        """Get user by external identity.

        Args:
            external_id: Identity provider's identifier

        Returns:
            User if found, None otherwise
        """
        with logfire.span(
            "user_service.get_by_external_id", external_id=external_id.root
        ):
            user = await self.user_repository.find_by_external_id(external_id)
            if user:
                logfire.info(
                    "User found", external_id=external_id.root, user_id=str(user.id)
                )
            else:
                logfire.warn("User not found", external_id=external_id.root)
            return user

    async def upsert_profile(
        self,
        external_id: ExternalId,
        username: Username,
        name: str,
        bio: str,
        image: str | None,
    ) -> User:
        """Create or update the profile keyed by external id.

        The username is stored lowercase (normalized by ``Username``) and the
        user is marked onboarded. The thread list of an existing user is
        left untouched.

        Args:
            external_id: Identity provider's identifier
            username: Requested username
            name: Display name
            bio: Profile bio
            image: Profile image reference

        Returns:
            Saved user

        Raises:
            UsernameTakenError: If another user already owns the username
        """
        with logfire.span(
            "user_service.upsert_profile",
            external_id=external_id.root,
            username=username.root,
        ):
            owner = await self.user_repository.find_by_username(username)
            if owner and owner.external_id != external_id:
                logfire.warn(
                    "Username already taken",
                    username=username.root,
                    owner_id=str(owner.id),
                )
                raise UsernameTakenError(username.root)

            now = utcnow()
            existing = await self.user_repository.find_by_external_id(external_id)
            if existing:
                user = existing.evolve(
                    username=username,
                    name=name,
                    bio=bio,
                    image=image,
                    onboarded=True,
                    updated_at=now,
                )
            else:
                user = User(
                    id=UserId(uuid4()),
                    external_id=external_id,
                    username=username,
                    name=name,
                    bio=bio,
                    image=image,
                    onboarded=True,
                    thread_ids=[],
                    created_at=now,
                    updated_at=now,
                )

            saved = await self.user_repository.save(user)
            logfire.info(
                "User profile saved",
                user_id=str(saved.id),
                username=saved.username.root,
                created=existing is None,
            )
            return saved

    async def search(
        self,
        requester_external_id: ExternalId,
        search_text: str,
        page: PageRequest,
        sort: SortOrder = SortOrder.DESC,
    ) -> UserPage:
        """Search other users by username or name.

        Args:
            requester_external_id: The searching user, excluded from results
            search_text: Substring to match; blank matches every user
            page: Page to return
            sort: Creation-time sort direction

        Returns:
            The page of users and whether more pages exist
        """
        text = search_text.strip() or None
        with logfire.span(
            "user_service.search",
            requester=requester_external_id.root,
            search_text=text,
            page=page.page,
            page_size=page.page_size,
        ):
            total = await self.user_repository.count_search(
                exclude_external_id=requester_external_id, search_text=text
            )
            users = await self.user_repository.search(
                exclude_external_id=requester_external_id,
                search_text=text,
                sort=sort,
                limit=page.page_size,
                offset=page.offset,
            )
            is_next = page.has_next(total, len(users))
            logfire.info("Users searched", count=len(users), total=total)
            return UserPage(users=users, total=total, is_next=is_next)

    async def get_author_summaries(
        self, user_ids: list[UserId]
    ) -> dict[UserId, AuthorSummary]:
        """Resolve author summaries for a batch of users.

        Args:
            user_ids: Users to resolve

        Returns:
            Mapping of user ID to summary; unknown users are left out
        """
        if not user_ids:
            return {}
        users = await self.user_repository.find_by_ids(list(dict.fromkeys(user_ids)))
        return {user.id: AuthorSummary.from_user(user) for user in users}

    async def append_thread(self, user_id: UserId, thread_id: ThreadId) -> None:
        """Record a new top-level thread on its author.

        Args:
            user_id: Author
            thread_id: New thread
        """
        with logfire.span(
            "user_service.append_thread",
            user_id=str(user_id),
            thread_id=str(thread_id),
        ):
            await self.user_repository.append_thread(user_id, thread_id)
            logfire.info(
                "Thread linked to author",
                user_id=str(user_id),
                thread_id=str(thread_id),
            )
