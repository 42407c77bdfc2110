"""Domain service base."""


class Service:
    """Marker base for domain services.

    Services hold only their injected collaborators and configuration, never
    per-request state, so one instance may serve many calls.
    """
