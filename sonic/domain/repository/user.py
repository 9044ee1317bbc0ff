"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from sonic.domain.model.user import User
from sonic.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once (batch query).

        Unknown IDs are skipped.

        Args:
            user_ids: User IDs to look up

        Returns:
            Users found, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by normalized (trimmed, lowercase) email.

        Args:
            email: Normalized email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If another user already has the same email
        """
        pass
