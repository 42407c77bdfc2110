"""Comment DTOs and the projections from domain models onto them."""

from datetime import datetime

from pydantic import BaseModel

from remark.domain.model import Comment, CommentAuthor
from remark.domain.service import CommentReply, CommentThread


class AuthorItem(BaseModel):
    """Author of a comment."""

    user_id: str
    handle: str
    display_name: str | None
    avatar_url: str | None


class CommentItem(BaseModel):
    """A single comment."""

    comment_id: str
    entity_type: str
    entity_id: str
    author_id: str
    text: str
    replied_comment_id: str | None
    concurrency_stamp: str
    created_at: datetime
    author: AuthorItem | None = None


class CommentThreadItem(CommentItem):
    """A top-level comment with its replies."""

    replies: list[CommentItem]


def to_author_item(author: CommentAuthor) -> AuthorItem:
    """Project an author snapshot onto its DTO."""
    return AuthorItem(
        user_id=str(author.id),
        handle=author.handle.root,
        display_name=author.display_name,
        avatar_url=author.avatar_url,
    )


def to_comment_item(
    comment: Comment, author: CommentAuthor | None = None
) -> CommentItem:
    """Project a comment (and optionally its author) onto its DTO."""
    return CommentItem(
        comment_id=str(comment.id),
        entity_type=comment.entity_type,
        entity_id=comment.entity_id,
        author_id=str(comment.author_id),
        text=comment.text,
        replied_comment_id=str(comment.replied_comment_id)
        if comment.replied_comment_id
        else None,
        concurrency_stamp=comment.concurrency_stamp,
        created_at=comment.created_at,
        author=to_author_item(author) if author else None,
    )


def to_reply_item(reply: CommentReply) -> CommentItem:
    """Project a thread reply onto its DTO."""
    return to_comment_item(reply.comment, reply.author)


def to_thread_item(thread: CommentThread) -> CommentThreadItem:
    """Project a thread onto its DTO."""
    item = to_comment_item(thread.comment, thread.author)
    return CommentThreadItem(
        **item.model_dump(),
        replies=[to_reply_item(reply) for reply in thread.replies],
    )
