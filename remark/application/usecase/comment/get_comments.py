"""Get comments use case."""

from pydantic import BaseModel

from remark.domain.service import CommentService

from .dto import CommentThreadItem, to_thread_item


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    entity_type: str
    entity_id: str


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    entity_type: str
    entity_id: str
    items: list[CommentThreadItem]
    total: int


class GetCommentsUseCase:
    """Use case for listing the comment threads of an entity."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request with the entity reference

        Returns:
            Top-level comments with nested replies, oldest first
        """
        threads = await self.comment_service.list_threads(
            entity_type=request.entity_type,
            entity_id=request.entity_id,
        )

        items = [to_thread_item(thread) for thread in threads]

        return GetCommentsResponse(
            entity_type=request.entity_type,
            entity_id=request.entity_id,
            items=items,
            total=sum(1 + len(item.replies) for item in items),
        )
