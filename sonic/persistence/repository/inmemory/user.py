"""In-memory user repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from sonic.domain.model.user import User
from sonic.domain.repository.user import UserRepository
from sonic.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users by ID."""
        return [
            self._users[uid] for uid in dict.fromkeys(user_ids) if uid in self._users
        ]

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user.

        Raises:
            IntegrityError: If another user already has the email
        """
        existing = await self.find_by_email(user.email)
        if existing and existing.id != user.id:
            raise IntegrityError("Duplicate email", None, Exception())

        self._users[user.id] = user
        return user
