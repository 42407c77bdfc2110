"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.error import NotAuthenticatedError
from remark.domain.service import CommentService
from remark.domain.value import CommentId, Principal

from .dto import CommentItem, to_comment_item


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    entity_type: str
    entity_id: str
    text: str
    principal: Principal | None  # None when the caller is not authenticated
    replied_comment_id: str | None = None  # Comment ID for replies


class CreateCommentUseCase:
    """Use case for commenting on an entity or replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            Created comment with its author

        Raises:
            NotAuthenticatedError: If the caller is not authenticated
            ValueError: If the replied comment ID is not a UUID
            LinkNotAllowedError: If the text links to a disallowed site
            NotFoundError: If the author or replied comment does not exist
        """
        if request.principal is None:
            raise NotAuthenticatedError("create comments")

        replied_comment_id = (
            CommentId(UUID(request.replied_comment_id))
            if request.replied_comment_id
            else None
        )

        created = await self.comment_service.create_comment(
            entity_type=request.entity_type,
            entity_id=request.entity_id,
            text=request.text,
            principal=request.principal,
            replied_comment_id=replied_comment_id,
        )

        return to_comment_item(created.comment, created.author)
