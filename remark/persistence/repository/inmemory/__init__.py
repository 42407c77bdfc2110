"""Dict-backed repositories with the same semantics as the PostgreSQL ones."""

from .comment import InMemoryCommentRepository
from .user import InMemoryUserRepository

__all__ = ["InMemoryCommentRepository", "InMemoryUserRepository"]
