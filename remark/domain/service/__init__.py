"""Domain services."""

from .authorization_service import AuthorizationService
from .base import Service
from .comment_service import CommentService
from .event_publisher import EventPublisher
from .jwt_service import JWTService
from .link_policy import ExternalLinkPolicy
from .thread_builder import CommentReply, CommentThread, build_comment_threads

__all__ = [
    "AuthorizationService",
    "CommentReply",
    "CommentService",
    "CommentThread",
    "EventPublisher",
    "ExternalLinkPolicy",
    "JWTService",
    "Service",
    "build_comment_threads",
]
