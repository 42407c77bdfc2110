"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from remark.domain.model.comment import Comment, CommentWithAuthor
from remark.domain.value import CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_with_authors(
        self, entity_type: str, entity_id: str
    ) -> List[CommentWithAuthor]:
        """Find all comments on an entity, each joined with its author.

        Comments are returned oldest first. Comments whose author record is
        missing are not returned.

        Args:
            entity_type: Type of the commented entity
            entity_id: Identifier of the commented entity

        Returns:
            List of comments with authors in creation order
        """
        pass

    @abstractmethod
    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The inserted comment
        """
        pass

    @abstractmethod
    async def update(self, comment: Comment, expected_stamp: str) -> Comment:
        """Update a comment if its stored stamp still matches.

        Args:
            comment: The comment carrying new state and a new stamp
            expected_stamp: Stamp the stored row must have for the write to apply

        Returns:
            The updated comment

        Raises:
            ConcurrencyConflictError: If the stored stamp differs or the row is gone
        """
        pass

    @abstractmethod
    async def delete_with_replies(self, comment: Comment) -> None:
        """Delete a comment together with all comments replying to it.

        Args:
            comment: The comment to delete
        """
        pass
