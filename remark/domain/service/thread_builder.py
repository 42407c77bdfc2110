"""Two-level comment thread construction."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from remark.domain.error import DataIntegrityError
from remark.domain.model import Comment, CommentAuthor, CommentWithAuthor
from remark.domain.value import CommentId


@dataclass
class CommentReply:
    """A reply inside a thread. Replies carry no replies of their own."""

    comment: Comment
    author: CommentAuthor


@dataclass
class CommentThread:
    """A top-level comment with its replies in encounter order."""

    comment: Comment
    author: CommentAuthor
    replies: list[CommentReply] = field(default_factory=list)


def build_comment_threads(
    comments: Sequence[CommentWithAuthor],
) -> list[CommentThread]:
    """Nest a flat comment list into top-level threads.

    The input order is kept at both levels; nothing is re-sorted. A reply
    that targets another reply is attached to that reply's top-level
    comment.

    Args:
        comments: Comments joined with their authors, in display order

    Returns:
        One thread per top-level comment

    Raises:
        DataIntegrityError: If a comment id repeats, or a reply's target is
            missing from the input
    """
    by_id: dict[CommentId, CommentWithAuthor] = {}
    for entry in comments:
        if entry.comment.id in by_id:
            raise DataIntegrityError(f"Duplicate comment in list: {entry.comment.id}")
        by_id[entry.comment.id] = entry

    threads: dict[CommentId, CommentThread] = {
        entry.comment.id: CommentThread(comment=entry.comment, author=entry.author)
        for entry in comments
        if entry.comment.replied_comment_id is None
    }

    for entry in comments:
        if entry.comment.replied_comment_id is None:
            continue
        root_id = _find_thread_root(entry.comment, by_id)
        threads[root_id].replies.append(
            CommentReply(comment=entry.comment, author=entry.author)
        )

    return list(threads.values())


def _find_thread_root(
    reply: Comment, by_id: dict[CommentId, CommentWithAuthor]
) -> CommentId:
    """Walk up reply targets until a top-level comment is reached."""
    seen = {reply.id}
    target_id = reply.replied_comment_id
    while target_id is not None:
        target = by_id.get(target_id)
        if target is None:
            raise DataIntegrityError(
                f"Comment {reply.id} replies to missing comment {target_id}"
            )
        if target_id in seen:
            raise DataIntegrityError(f"Reply cycle detected at comment {target_id}")
        seen.add(target_id)
        if target.comment.replied_comment_id is None:
            return target_id
        target_id = target.comment.replied_comment_id
    raise DataIntegrityError(f"Comment {reply.id} is not a reply")
