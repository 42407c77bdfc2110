"""In-memory comment repository for testing."""

from typing import Optional

from remark.domain.error import ConcurrencyConflictError
from remark.domain.model import CommentAuthor
from remark.domain.model.comment import Comment, CommentWithAuthor
from remark.domain.repository.comment import CommentRepository
from remark.domain.repository.user import UserRepository
from remark.domain.value import CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Authors are joined from the given user repository, mirroring the inner
    join of the PostgreSQL implementation.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._users = user_repository

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_with_authors(
        self, entity_type: str, entity_id: str
    ) -> list[CommentWithAuthor]:
        """Find all comments on an entity joined with their authors."""
        comments = [
            c
            for c in self._comments.values()
            if c.entity_type == entity_type and c.entity_id == entity_id
        ]

        # Sort oldest first (stable, so insertion order breaks ties)
        comments.sort(key=lambda c: c.created_at)

        items = []
        for comment in comments:
            user = await self._users.find_by_id(comment.author_id)
            if user is None:
                continue
            items.append(
                CommentWithAuthor(comment=comment, author=CommentAuthor.from_user(user))
            )
        return items

    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        self._comments[comment.id] = comment
        return comment

    async def update(self, comment: Comment, expected_stamp: str) -> Comment:
        """Update a comment if the stored stamp matches."""
        stored = self._comments.get(comment.id)
        if stored is None or stored.concurrency_stamp != expected_stamp:
            raise ConcurrencyConflictError("Comment", str(comment.id))
        self._comments[comment.id] = comment
        return comment

    async def delete_with_replies(self, comment: Comment) -> None:
        """Delete a comment and its replies."""
        reply_ids = [
            c.id for c in self._comments.values() if c.replied_comment_id == comment.id
        ]
        for reply_id in reply_ids:
            self._comments.pop(reply_id, None)
        self._comments.pop(comment.id, None)
