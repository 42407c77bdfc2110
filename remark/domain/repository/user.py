"""User repository contract.

Remark does not manage accounts. Users are mirrored from the identity
provider so comments can be listed with their author's handle and avatar.
"""

from abc import ABC, abstractmethod
from typing import Optional

from remark.domain.model.user import User
from remark.domain.value import UserId


class UserRepository(ABC):
    """Store of mirrored user records."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Return the user, or None if it was never mirrored."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a user, or refresh the profile fields of an existing one."""
