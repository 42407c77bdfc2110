"""Event delivery component."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from remark.adapter.events import WebhookEventPublisher
from remark.config import EventSettings
from remark.domain.service import EventPublisher
from remark.util.di.base import ProviderBase


class EventsProvider(ProviderBase):
    """Events component base."""

    __mock_component__ = "events"


class ProdEventsProvider(EventsProvider):
    """Publishes comment events to the configured webhook."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_event_publisher(
        self, event_settings: EventSettings
    ) -> AsyncIterator[EventPublisher]:
        """Provide the webhook publisher.

        Deliveries still in flight are awaited when the app container closes.
        """
        publisher = WebhookEventPublisher(
            webhook_url=event_settings.webhook_url,
            timeout_seconds=event_settings.timeout_seconds,
        )
        yield publisher
        await publisher.aclose()
