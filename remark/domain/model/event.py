"""Domain events."""

from datetime import datetime

from pydantic import Field

from remark.domain.model.common import DomainModel
from remark.domain.value import CommentId


class CommentCreatedEvent(DomainModel):
    """Published after a comment has been persisted."""

    comment_id: CommentId
    entity_type: str
    entity_id: str
    occurred_at: datetime = Field(default_factory=datetime.now)
