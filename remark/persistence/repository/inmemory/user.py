"""Dict-backed user store for tests."""

from typing import Optional

from remark.domain.model.user import User
from remark.domain.repository.user import UserRepository
from remark.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """Keeps users in a dict keyed by id; saving an existing id replaces it."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def save(self, user: User) -> User:
        self._users[user.id] = user
        return user
