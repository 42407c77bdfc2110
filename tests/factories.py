"""Factories for building domain objects in tests."""

from datetime import datetime, timedelta
from uuid import uuid4

from remark.domain.model import Comment, CommentAuthor, CommentWithAuthor, User
from remark.domain.value import CommentId, Handle, Principal, UserId

BASE_TIME = datetime(2025, 1, 1, 12, 0, 0)


def make_user(handle: str = "alice") -> User:
    """Build a user with a fresh ID."""
    return User(
        id=UserId(uuid4()),
        handle=Handle(handle),
        display_name=handle.title(),
        avatar_url=f"https://avatars.example.com/{handle}.png",
    )


def make_principal(user: User, permissions: set[str] | None = None) -> Principal:
    """Build the principal of an authenticated user."""
    return Principal(
        user_id=user.id,
        handle=user.handle,
        permissions=frozenset(permissions or ()),
    )


def make_comment(
    author: User,
    text: str = "A comment",
    replied_comment_id: CommentId | None = None,
    entity_type: str = "blog_post",
    entity_id: str = "post-1",
    minutes: int = 0,
) -> Comment:
    """Build a comment created ``minutes`` after a fixed base time."""
    return Comment(
        id=CommentId(uuid4()),
        entity_type=entity_type,
        entity_id=entity_id,
        author_id=author.id,
        text=text,
        replied_comment_id=replied_comment_id,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


def with_author(comment: Comment, author: User) -> CommentWithAuthor:
    """Pair a comment with its author snapshot."""
    return CommentWithAuthor(comment=comment, author=CommentAuthor.from_user(author))
