"""User domain service."""

from typing import Sequence

import logfire

from sonic.domain.model import User
from sonic.domain.model.user import normalize_email
from sonic.domain.repository import UserRepository
from sonic.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User | None:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
            return user

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email (matched case-insensitively)."""
        return await self.user_repository.find_by_email(normalize_email(email))

    async def get_display_names(
        self, user_ids: Sequence[UserId]
    ) -> dict[UserId, str]:
        """Resolve display names for several users with one lookup.

        Duplicate IDs are collapsed before querying; unknown users are
        missing from the result.

        Args:
            user_ids: User IDs, possibly repeated

        Returns:
            Mapping of user ID to display name
        """
        distinct_ids = list(dict.fromkeys(user_ids))
        if not distinct_ids:
            return {}

        with logfire.span("user_service.get_display_names", count=len(distinct_ids)):
            users = await self.user_repository.find_by_ids(distinct_ids)
            return {user.id: user.display_name for user in users}

    async def save_user(self, user: User) -> User:
        """Save a user.

        Args:
            user: User to save

        Returns:
            Saved user
        """
        with logfire.span("user_service.save_user", user_id=str(user.id)):
            saved = await self.user_repository.save(user)
            logfire.info("User saved", user_id=str(saved.id))
            return saved
