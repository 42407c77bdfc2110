"""Unit tests for event publishers."""

import json
from uuid import uuid4

import httpx
import pytest

from remark.adapter.error import EventDeliveryError
from remark.adapter.events import InMemoryEventPublisher, WebhookEventPublisher
from remark.domain.model import CommentCreatedEvent
from remark.domain.value import CommentId


def _event() -> CommentCreatedEvent:
    return CommentCreatedEvent(
        comment_id=CommentId(uuid4()),
        entity_type="blog_post",
        entity_id="post-1",
    )


class TestWebhookEventPublisher:
    """Tests for WebhookEventPublisher."""

    @pytest.mark.asyncio
    async def test_posts_event_as_json(self):
        """The webhook receives the event type and its fields."""
        # Arrange
        received: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            received.append(json.loads(request.content))
            return httpx.Response(202)

        publisher = WebhookEventPublisher(
            "https://hooks.example.com/comments",
            transport=httpx.MockTransport(handler),
        )
        event = _event()

        # Act
        await publisher.publish(event)
        await publisher.aclose()

        # Assert
        assert len(received) == 1
        assert received[0]["type"] == "comment.created"
        assert received[0]["comment_id"] == str(event.comment_id)
        assert received[0]["entity_type"] == "blog_post"
        assert received[0]["entity_id"] == "post-1"

    @pytest.mark.asyncio
    async def test_failed_delivery_is_swallowed(self):
        """A failing webhook never surfaces to the publisher's caller."""
        # Arrange
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            return httpx.Response(500)

        publisher = WebhookEventPublisher(
            "https://hooks.example.com/comments",
            transport=httpx.MockTransport(handler),
        )

        # Act
        await publisher.publish(_event())
        await publisher.aclose()

        # Assert
        assert calls == 1

    @pytest.mark.asyncio
    async def test_post_wraps_http_errors(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        publisher = WebhookEventPublisher(
            "https://hooks.example.com/comments",
            transport=httpx.MockTransport(handler),
        )

        with pytest.raises(EventDeliveryError, match="Webhook delivery failed"):
            await publisher._post(_event())

    @pytest.mark.asyncio
    async def test_unexpected_delivery_error_does_not_escape_task(self):
        """Errors other than HTTP failures are logged, not left on the task."""
        # Arrange
        def handler(request: httpx.Request) -> httpx.Response:
            raise RuntimeError("transport bug")

        publisher = WebhookEventPublisher(
            "https://hooks.example.com/comments",
            transport=httpx.MockTransport(handler),
        )

        # Act
        await publisher.publish(_event())
        tasks = list(publisher._pending)
        await publisher.aclose()

        # Assert
        assert len(tasks) == 1
        assert tasks[0].exception() is None

    @pytest.mark.asyncio
    async def test_without_url_nothing_is_sent(self):
        """With no webhook configured, publishing only logs."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        publisher = WebhookEventPublisher(None, transport=httpx.MockTransport(handler))

        await publisher.publish(_event())
        await publisher.aclose()

        assert not publisher._pending


class TestInMemoryEventPublisher:
    """Tests for InMemoryEventPublisher."""

    @pytest.mark.asyncio
    async def test_records_events(self):
        publisher = InMemoryEventPublisher()
        event = _event()

        await publisher.publish(event)

        assert publisher.events == [event]

    @pytest.mark.asyncio
    async def test_failing_publisher_raises(self):
        publisher = InMemoryEventPublisher(fail=True)

        with pytest.raises(EventDeliveryError):
            await publisher.publish(_event())

        assert publisher.events == []
