"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.error import NotAuthenticatedError
from remark.domain.service import CommentService
from remark.domain.value import CommentId, Principal

from .dto import CommentItem, to_comment_item


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    text: str
    principal: Principal | None
    concurrency_stamp: str | None = None  # Stamp the client last saw


class UpdateCommentUseCase:
    """Use case for updating a comment's text content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            Updated comment with its new concurrency stamp

        Raises:
            NotAuthenticatedError: If the caller is not authenticated
            ValueError: If the comment ID is not a UUID
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller is not the author
            LinkNotAllowedError: If the text links to a disallowed site
            ConcurrencyConflictError: If the concurrency stamp is stale
        """
        if request.principal is None:
            raise NotAuthenticatedError("edit comments")

        updated = await self.comment_service.update_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            text=request.text,
            principal=request.principal,
            concurrency_stamp=request.concurrency_stamp,
        )

        return to_comment_item(updated)
