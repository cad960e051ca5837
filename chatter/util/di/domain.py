"""Domain service providers."""

from dishka import Scope, provide

from chatter.domain.repository import ThreadRepository, UserRepository
from chatter.domain.service import ThreadService, UserService
from chatter.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services, one set per request.

    Services share the request's repositories and therefore its session, so
    everything a request writes lands in the same transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        return UserService(user_repository=user_repository)

    @provide
    def get_thread_service(
        self, thread_repository: ThreadRepository, user_service: UserService
    ) -> ThreadService:
        """Thread service, reusing the request's user service for authors."""
        return ThreadService(
            thread_repository=thread_repository, user_service=user_service
        )
