"""Event publishers for comment notifications.

The webhook publisher posts each event as JSON to a configured endpoint on a
background task, so request handling never waits on the consumer.
"""

import asyncio

import httpx
import logfire

from remark.adapter.error import EventDeliveryError
from remark.domain.model import CommentCreatedEvent
from remark.domain.service.event_publisher import EventPublisher


class WebhookEventPublisher(EventPublisher):
    """Delivers events to an HTTP webhook, fire-and-forget.

    Delivery is attempted once. Failures are logged and dropped.
    """

    def __init__(
        self,
        webhook_url: str | None,
        timeout_seconds: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize webhook publisher.

        Args:
            webhook_url: Endpoint receiving events (None: log only)
            timeout_seconds: Per-delivery HTTP timeout
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        self.webhook_url = webhook_url
        self.timeout_seconds = timeout_seconds
        self.transport = transport
        self._pending: set[asyncio.Task] = set()

    async def publish(self, event: CommentCreatedEvent) -> None:
        """Schedule delivery of an event and return immediately."""
        if not self.webhook_url:
            logfire.info(
                "Comment event published (no webhook configured)",
                comment_id=str(event.comment_id),
            )
            return

        task = asyncio.create_task(self._deliver(event))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _deliver(self, event: CommentCreatedEvent) -> None:
        """Post one event to the webhook."""
        with logfire.span(
            "webhook_event_publisher.deliver", comment_id=str(event.comment_id)
        ):
            try:
                await self._post(event)
                logfire.info("Comment event delivered", comment_id=str(event.comment_id))
            except EventDeliveryError as e:
                logfire.error(
                    "Comment event delivery failed",
                    comment_id=str(event.comment_id),
                    error=str(e),
                )
            except Exception as e:
                # Nothing awaits this task, so unexpected errors end here
                logfire.error(
                    "Unexpected error delivering comment event",
                    comment_id=str(event.comment_id),
                    error=str(e),
                    error_type=type(e).__name__,
                )

    async def _post(self, event: CommentCreatedEvent) -> None:
        """Send the request, raising EventDeliveryError on any failure."""
        payload = {"type": "comment.created", **event.model_dump(mode="json")}
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self.transport
            ) as client:
                response = await client.post(self.webhook_url, json=payload)
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise EventDeliveryError(f"Webhook delivery failed: {e}") from e

    async def aclose(self) -> None:
        """Wait for in-flight deliveries to finish."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)


class InMemoryEventPublisher(EventPublisher):
    """Records published events in memory for testing."""

    def __init__(self, fail: bool = False) -> None:
        """Initialize in-memory publisher.

        Args:
            fail: Raise on every publish, to exercise failure handling
        """
        self.events: list[CommentCreatedEvent] = []
        self.fail = fail

    async def publish(self, event: CommentCreatedEvent) -> None:
        """Record the event."""
        if self.fail:
            raise EventDeliveryError("In-memory publisher configured to fail")
        self.events.append(event)
