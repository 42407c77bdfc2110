"""Event publisher adapters."""

from .publisher import InMemoryEventPublisher, WebhookEventPublisher

__all__ = [
    "InMemoryEventPublisher",
    "WebhookEventPublisher",
]
