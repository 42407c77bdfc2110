"""Repositories backed by PostgreSQL through SQLAlchemy Core."""

from .comment import PostgresCommentRepository
from .user import PostgresUserRepository

__all__ = ["PostgresCommentRepository", "PostgresUserRepository"]
