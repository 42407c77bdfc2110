"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from remark.domain.error import ConcurrencyConflictError
from remark.domain.model import Comment, CommentWithAuthor
from remark.domain.repository import CommentRepository
from remark.domain.value import CommentId
from remark.persistence.mappers import (
    comment_to_dict,
    row_to_comment,
    row_to_comment_author,
)
from remark.persistence.tables import comments_table, users_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_with_authors(
        self, entity_type: str, entity_id: str
    ) -> List[CommentWithAuthor]:
        """Find all comments on an entity joined with their authors."""
        stmt = (
            select(
                comments_table,
                users_table.c.handle.label("author_handle"),
                users_table.c.display_name.label("author_display_name"),
                users_table.c.avatar_url.label("author_avatar_url"),
            )
            .join(users_table, users_table.c.id == comments_table.c.author_id)
            .where(comments_table.c.entity_type == entity_type)
            .where(comments_table.c.entity_id == entity_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )

        result = await self.session.execute(stmt)
        items = []
        for row in result.fetchall():
            data = row._asdict()
            items.append(
                CommentWithAuthor(
                    comment=row_to_comment(data),
                    author=row_to_comment_author(data),
                )
            )
        return items

    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update(self, comment: Comment, expected_stamp: str) -> Comment:
        """Update text and stamp, guarded by the expected stamp."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment.id)
            .where(comments_table.c.concurrency_stamp == expected_stamp)
            .values(
                text=comment.text,
                concurrency_stamp=comment.concurrency_stamp,
            )
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            # Stamp changed or row deleted since it was read
            raise ConcurrencyConflictError("Comment", str(comment.id))

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def delete_with_replies(self, comment: Comment) -> None:
        """Delete a comment and every comment replying to it."""
        stmt = comments_table.delete().where(
            or_(
                comments_table.c.id == comment.id,
                comments_table.c.replied_comment_id == comment.id,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
