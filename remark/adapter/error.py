"""Errors raised by outbound adapters."""


class AdapterError(Exception):
    """An external system could not be reached or rejected a call."""


class EventDeliveryError(AdapterError):
    """An event could not be handed to its consumer."""
