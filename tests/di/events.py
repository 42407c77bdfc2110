"""Mock event providers for testing."""

from dishka import Scope, provide

from remark.adapter.events import InMemoryEventPublisher
from remark.domain.service import EventPublisher
from remark.util.di.infrastructure.events import EventsProvider


class MockEventsProvider(EventsProvider):
    """Mock events provider recording events in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_event_publisher(self) -> EventPublisher:
        """Provide in-memory event publisher."""
        return InMemoryEventPublisher()
