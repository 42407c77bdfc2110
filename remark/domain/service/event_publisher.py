"""Event publisher interface."""

from remark.domain.model import CommentCreatedEvent


class EventPublisher:
    """Generic one-way notification sink for domain events.

    Delivery is best effort. Callers never wait for the event to reach its
    consumers.
    """

    async def publish(self, event: CommentCreatedEvent) -> None:
        """Hand an event over for delivery.

        Args:
            event: The event to deliver
        """
        raise NotImplementedError
