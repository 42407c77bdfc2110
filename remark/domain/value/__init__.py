"""Domain value objects for Remark."""

from remark.domain.value.identifiers import CommentId, UserId
from remark.domain.value.types import (
    Handle,
    Permission,
    Principal,
    new_concurrency_stamp,
)

__all__ = [
    # Identifiers
    "CommentId",
    "UserId",
    # Types
    "Handle",
    "Permission",
    "Principal",
    "new_concurrency_stamp",
]
