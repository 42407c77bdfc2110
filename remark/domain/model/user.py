"""User entity and the author snapshot attached to comments."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from remark.domain.model.common import DomainModel
from remark.domain.value import UserId
from remark.domain.value.types import Handle


class User(DomainModel):
    """A user who can author comments."""

    id: UserId
    handle: Handle
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)


class CommentAuthor(DomainModel):
    """Snapshot of a comment's author, resolved at query time."""

    id: UserId
    handle: Handle
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "CommentAuthor":
        """Project a user record onto the author snapshot."""
        return cls(
            id=user.id,
            handle=user.handle,
            display_name=user.display_name,
            avatar_url=user.avatar_url,
        )
