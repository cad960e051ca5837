"""Dependency injection wiring."""

from chatter.util.di.base import (
    Component,
    ProviderBase,
    instantiate_providers,
    mockable_components,
    resolve_provider,
)
from chatter.util.di.container import PROVIDERS, create_container, setup_di

__all__ = [
    "Component",
    "PROVIDERS",
    "ProviderBase",
    "create_container",
    "instantiate_providers",
    "mockable_components",
    "resolve_provider",
    "setup_di",
]
