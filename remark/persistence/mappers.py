"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from remark.domain.model import Comment, CommentAuthor, User
from remark.domain.value import CommentId, UserId
from remark.domain.value.types import Handle


def _as_uuid(value: Any) -> UUID:
    """Accept both UUID objects and their string form."""
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_as_uuid(row["id"])),
        handle=Handle(row["handle"]),
        display_name=row.get("display_name"),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_as_uuid(row["id"])),
        entity_type=row["entity_type"],
        entity_id=row["entity_id"],
        author_id=UserId(_as_uuid(row["author_id"])),
        text=row["text"],
        replied_comment_id=CommentId(_as_uuid(row["replied_comment_id"]))
        if row.get("replied_comment_id")
        else None,
        concurrency_stamp=row["concurrency_stamp"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return comment.model_dump()


def row_to_comment_author(row: Dict[str, Any]) -> CommentAuthor:
    """Convert the author columns of a joined comment row.

    Args:
        row: Joined row with ``author_``-prefixed user columns

    Returns:
        Author snapshot
    """
    return CommentAuthor(
        id=UserId(_as_uuid(row["author_id"])),
        handle=Handle(row["author_handle"]),
        display_name=row.get("author_display_name"),
        avatar_url=row.get("author_avatar_url"),
    )
