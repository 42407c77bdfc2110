"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.error import NotAuthenticatedError
from remark.domain.service import CommentService
from remark.domain.value import CommentId, Principal


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    principal: Principal | None


class DeleteCommentUseCase:
    """Use case for deleting a comment together with its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotAuthenticatedError: If the caller is not authenticated
            ValueError: If the comment ID is not a UUID
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller may not delete the comment
        """
        if request.principal is None:
            raise NotAuthenticatedError("delete comments")

        await self.comment_service.delete_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            principal=request.principal,
        )
