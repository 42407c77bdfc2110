"""Comment entity.

Comments attach to any commentable entity, identified by an
``(entity_type, entity_id)`` pair. Threading is two levels deep: top-level
comments and replies to them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from remark.domain.model.common import DomainModel
from remark.domain.model.user import CommentAuthor
from remark.domain.value import CommentId, UserId, new_concurrency_stamp

MAX_TEXT_LENGTH = 10000
MAX_ENTITY_TYPE_LENGTH = 64
MAX_ENTITY_ID_LENGTH = 64


class Comment(DomainModel):
    """Comment entity.

    Represents a top-level comment on an entity, or a reply to one.

    Threading is managed through ``replied_comment_id``: None for top-level
    comments, otherwise the id of the top-level comment being replied to.
    The concurrency stamp changes on every mutation and guards updates
    against lost writes.
    """

    id: CommentId
    entity_type: str = Field(min_length=1, max_length=MAX_ENTITY_TYPE_LENGTH)
    entity_id: str = Field(min_length=1, max_length=MAX_ENTITY_ID_LENGTH)
    author_id: UserId
    text: str = Field(min_length=1, max_length=MAX_TEXT_LENGTH)
    replied_comment_id: Optional[CommentId] = None
    concurrency_stamp: str = Field(default_factory=new_concurrency_stamp)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_reply(self) -> bool:
        """Whether this comment replies to another comment."""
        return self.replied_comment_id is not None

    def with_text(self, text: str) -> "Comment":
        """Return a copy with new text and a regenerated concurrency stamp."""
        return self.evolve(text=text, concurrency_stamp=new_concurrency_stamp())


class CommentWithAuthor(DomainModel):
    """Read model pairing a comment with its author. Never persisted."""

    comment: Comment
    author: CommentAuthor
