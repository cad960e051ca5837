"""Production container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from chatter.util.di.application import ProdApplicationProvider
from chatter.util.di.base import ProviderBase, instantiate_providers
from chatter.util.di.core import ProdConfigProvider
from chatter.util.di.domain import ProdDomainProvider
from chatter.util.di.infrastructure import PersistenceProvider

# Mockable bases are listed once; the implementation is picked per container
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def create_container() -> AsyncContainer:
    """Build the container used by the running API.

    Settings come from the environment; persistence is PostgreSQL.
    """
    return make_async_container(
        *instantiate_providers(PROVIDERS), FastapiProvider()
    )


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to ``app`` so routes can use ``FromDishka``."""
    setup_dishka(container, app)
