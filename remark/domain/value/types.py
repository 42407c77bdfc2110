"""Domain value objects for Remark.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum
from uuid import uuid4

from pydantic import Field, field_validator

from remark.domain.value.common import RootValueObject, ValueObject
from remark.domain.value.identifiers import UserId


class Permission(str, Enum):
    """Capabilities a principal may be granted through its token."""

    DELETE_ANY_COMMENT = "comments.delete_any"


class Handle(RootValueObject[str]):
    """Human-readable user handle."""

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Handle must be 1-255 characters")
        return v


class Principal(ValueObject):
    """The authenticated caller of an operation.

    Resolved from the auth token; carries the permissions the token grants.
    """

    user_id: UserId
    handle: Handle
    permissions: frozenset[str] = Field(default_factory=frozenset)


def new_concurrency_stamp() -> str:
    """Generate a fresh opaque concurrency stamp."""
    return uuid4().hex
