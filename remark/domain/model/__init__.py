"""Domain model entities for Remark."""

from remark.domain.model.comment import Comment, CommentWithAuthor
from remark.domain.model.event import CommentCreatedEvent
from remark.domain.model.user import CommentAuthor, User

__all__ = [
    "Comment",
    "CommentAuthor",
    "CommentCreatedEvent",
    "CommentWithAuthor",
    "User",
]
