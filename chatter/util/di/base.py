"""Provider base class and mock/production selection."""

from typing import ClassVar, Iterable, Literal

from dishka import Provider

Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider carrying the metadata used to swap in test doubles.

    A provider that names a ``__mock_component__`` is only a base: one
    subclass wires the production implementation, another one (with
    ``__is_mock__`` set) the in-memory one. Providers without a component
    are registered as they are.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False


def mockable_components(bases: Iterable[type[ProviderBase]]) -> set[Component]:
    """Names of the components that have a mock implementation slot."""
    return {b.__mock_component__ for b in bases if b.__mock_component__}


def resolve_provider(
    base: type[ProviderBase], mocked: Iterable[Component] = ()
) -> type[ProviderBase]:
    """Choose the implementation of ``base``.

    Args:
        base: Registered provider class
        mocked: Components that should use their mock implementation

    Raises:
        ValueError: No subclass of ``base`` matches the requested kind
    """
    component = base.__mock_component__
    if component is None:
        return base

    use_mock = component in set(mocked)
    for impl in base.__subclasses__():
        if impl.__is_mock__ is use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} provider registered for '{component}'")


def instantiate_providers(
    bases: Iterable[type[ProviderBase]], mocked: Iterable[Component] = ()
) -> list[ProviderBase]:
    """Resolve and instantiate every provider in ``bases``."""
    mocked = set(mocked)
    return [resolve_provider(base, mocked)() for base in bases]
