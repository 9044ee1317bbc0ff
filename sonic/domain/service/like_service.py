"""Like domain service."""

from typing import Sequence

import logfire
from sqlalchemy.exc import IntegrityError

from sonic.domain.model.like import Like
from sonic.domain.repository import LikeRepository
from sonic.domain.value import PostId, UserId

from .base import Service


class LikeService(Service):
    """Domain service for like operations."""

    def __init__(self, like_repository: LikeRepository) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
        """
        self.like_repository = like_repository

    async def toggle(self, post_id: PostId, user_id: UserId) -> bool:
        """Flip the user's like on a post.

        Removal is attempted first; when nothing was removed a like is
        inserted. A concurrent duplicate insert hits the unique constraint
        and is swallowed, so the post ends up liked either way.

        Args:
            post_id: Post ID
            user_id: User ID

        Returns:
            True if the post is liked after the call
        """
        with logfire.span(
            "like_service.toggle", post_id=str(post_id), user_id=str(user_id)
        ):
            removed = await self.like_repository.delete_by_post_and_user(
                post_id, user_id
            )
            if removed:
                logfire.info("Like removed", post_id=str(post_id), user_id=str(user_id))
                return False

            await self.add(post_id, user_id)
            return True

    async def add(self, post_id: PostId, user_id: UserId) -> None:
        """Like a post, ignoring an existing like."""
        try:
            await self.like_repository.save(Like.create_new(post_id, user_id))
            logfire.info("Like added", post_id=str(post_id), user_id=str(user_id))
        except IntegrityError:
            logfire.warn(
                "Duplicate like ignored", post_id=str(post_id), user_id=str(user_id)
            )

    async def is_liked(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether the user likes the post."""
        return await self.like_repository.exists(post_id, user_id)

    async def count_for_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        return await self.like_repository.count_by_post(post_id)

    async def count_for_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count likes for several posts at once."""
        if not post_ids:
            return {}
        return await self.like_repository.count_by_posts(post_ids)
