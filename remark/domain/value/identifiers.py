"""Typed identifiers.

Comments and users are both keyed by UUID; distinct NewTypes keep a user id
from being passed where a comment id is expected.
"""

from typing import NewType
from uuid import UUID

CommentId = NewType("CommentId", UUID)
UserId = NewType("UserId", UUID)
