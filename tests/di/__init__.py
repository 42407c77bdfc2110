"""Mock providers and the test container.

Importing the mock providers registers them as component implementations.
"""

from .events import MockEventsProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockEventsProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
