"""Configuration providers."""

from dishka import Scope, provide

from chatter.config import APISettings, PaginationSettings, Settings
from chatter.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings read once per container from the environment and ``.env``."""

    scope = Scope.APP

    @provide
    def get_settings(self) -> Settings:
        return Settings()

    @provide
    def get_pagination_settings(self, settings: Settings) -> PaginationSettings:
        return settings.pagination

    @provide
    def get_api_settings(self, settings: Settings) -> APISettings:
        return settings.api
