"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotAuthenticatedError(DomainError):
    """Raised when an operation requires an authenticated principal."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Authentication required to {action}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they have no rights over."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConcurrencyConflictError(DomainError):
    """Raised when a write is based on a stale concurrency stamp."""

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"{resource} {resource_id} was modified by someone else, reload and retry"
        )


class LinkNotAllowedError(BusinessRuleViolationError):
    """Raised when comment text embeds an external URL outside the allow-list."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(
            "Comment contains an external link that is not allowed. "
            f"Please remove it and try again: {url}"
        )


class DataIntegrityError(DomainError):
    """Raised when stored data violates a structural invariant.

    Not a user error: it signals a bug or corrupted data and is never
    translated into a client-facing 4xx response.
    """

    pass
