"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from sonic.domain.model.like import Like
from sonic.domain.value import PostId, UserId


class LikeRepository(ABC):
    """Repository for Like entity.

    One like per (post, user) is guaranteed by a unique constraint.
    """

    @abstractmethod
    async def exists(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether the user likes the post."""
        pass

    @abstractmethod
    async def save(self, like: Like) -> Like:
        """Save a like (create).

        Args:
            like: The like to save

        Returns:
            The saved like

        Raises:
            IntegrityError: If the user already likes the post
        """
        pass

    @abstractmethod
    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete the user's like on a post.

        Returns:
            True if a like was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        pass

    @abstractmethod
    async def count_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count likes for several posts (batch query).

        Posts without likes map to 0.
        """
        pass
