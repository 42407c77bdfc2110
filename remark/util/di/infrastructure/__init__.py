"""Infrastructure component providers.

The production implementations are imported so that they register as
subclasses of their component base.
"""

from .events import EventsProvider, ProdEventsProvider
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "EventsProvider",
    "PersistenceProvider",
    "ProdEventsProvider",
    "ProdPersistenceProvider",
]
