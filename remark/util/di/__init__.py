"""Dependency injection wiring.

``PROVIDERS`` lists every provider the application needs. Infrastructure
entries are component bases; ``get_provider`` resolves them to production or
test implementations.
"""

from remark.util.di.application import ProdApplicationProvider
from remark.util.di.base import (
    Component,
    ProviderBase,
    get_provider,
    swappable_components,
)
from remark.util.di.core import ProdConfigProvider
from remark.util.di.domain import ProdDomainProvider
from remark.util.di.infrastructure import EventsProvider, PersistenceProvider

PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable infrastructure
    EventsProvider,
    PersistenceProvider,
]

__all__ = [
    "Component",
    "PROVIDERS",
    "ProviderBase",
    "get_provider",
    "swappable_components",
]
