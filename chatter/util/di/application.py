"""Application layer DI providers."""

from dishka import Scope, provide

from chatter.application.usecase.thread import (
    AddReplyUseCase,
    CreateThreadUseCase,
    GetActivityUseCase,
    GetThreadUseCase,
    ListThreadsUseCase,
)
from chatter.application.usecase.user import (
    GetUserThreadsUseCase,
    GetUserUseCase,
    SearchUsersUseCase,
    UpsertUserUseCase,
)
from chatter.config import PaginationSettings
from chatter.domain.repository import UnitOfWork
from chatter.domain.service import ThreadService, UserService
from chatter.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_create_thread_use_case(
        self, thread_service: ThreadService, unit_of_work: UnitOfWork
    ) -> CreateThreadUseCase:
        """Provide create thread use case."""
        return CreateThreadUseCase(
            thread_service=thread_service, unit_of_work=unit_of_work
        )

    @provide(scope=Scope.REQUEST)
    def get_add_reply_use_case(
        self, thread_service: ThreadService, unit_of_work: UnitOfWork
    ) -> AddReplyUseCase:
        """Provide add reply use case."""
        return AddReplyUseCase(
            thread_service=thread_service, unit_of_work=unit_of_work
        )

    @provide(scope=Scope.REQUEST)
    def get_list_threads_use_case(
        self, thread_service: ThreadService, pagination: PaginationSettings
    ) -> ListThreadsUseCase:
        """Provide list threads use case."""
        return ListThreadsUseCase(thread_service=thread_service, pagination=pagination)

    @provide(scope=Scope.REQUEST)
    def get_thread_use_case(self, thread_service: ThreadService) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_activity_use_case(
        self, thread_service: ThreadService
    ) -> GetActivityUseCase:
        """Provide get activity use case."""
        return GetActivityUseCase(thread_service=thread_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_upsert_user_use_case(
        self, user_service: UserService, unit_of_work: UnitOfWork
    ) -> UpsertUserUseCase:
        """Provide upsert user use case."""
        return UpsertUserUseCase(user_service=user_service, unit_of_work=unit_of_work)

    @provide(scope=Scope.REQUEST)
    def get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_user_threads_use_case(
        self, user_service: UserService, thread_service: ThreadService
    ) -> GetUserThreadsUseCase:
        """Provide get user threads use case."""
        return GetUserThreadsUseCase(
            user_service=user_service, thread_service=thread_service
        )

    @provide(scope=Scope.REQUEST)
    def get_search_users_use_case(
        self, user_service: UserService, pagination: PaginationSettings
    ) -> SearchUsersUseCase:
        """Provide search users use case."""
        return SearchUsersUseCase(user_service=user_service, pagination=pagination)
