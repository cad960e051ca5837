"""Infrastructure providers."""

# ProdPersistenceProvider must be imported so resolve_provider can find it
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
