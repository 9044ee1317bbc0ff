"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from sonic.domain.model.comment import Comment
from sonic.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(
        self, comment_id: CommentId, include_deleted: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier
            include_deleted: Whether to return soft-deleted comments

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(
        self, post_id: PostId, limit: int = 10, offset: int = 0
    ) -> list[Comment]:
        """Find non-deleted comments on a post, oldest first.

        Args:
            post_id: The post ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Page of comments
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count non-deleted comments on a post."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass
