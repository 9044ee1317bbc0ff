"""In-memory like repository for testing."""

from typing import Sequence

from sqlalchemy.exc import IntegrityError

from sonic.domain.model.like import Like
from sonic.domain.repository.like import LikeRepository
from sonic.domain.value import PostId, UserId


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: list[Like] = []

    async def exists(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether the user likes the post."""
        return any(
            like.post_id == post_id and like.user_id == user_id for like in self._likes
        )

    async def save(self, like: Like) -> Like:
        """Save a like.

        Raises:
            IntegrityError: If the user already likes the post
        """
        if await self.exists(like.post_id, like.user_id):
            raise IntegrityError("Duplicate like", None, Exception())

        self._likes.append(like)
        return like

    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete the user's like on a post."""
        for i, like in enumerate(self._likes):
            if like.post_id == post_id and like.user_id == user_id:
                self._likes.pop(i)
                return True
        return False

    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        return sum(1 for like in self._likes if like.post_id == post_id)

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count likes for several posts."""
        counts: dict[PostId, int] = {post_id: 0 for post_id in post_ids}
        for like in self._likes:
            if like.post_id in counts:
                counts[like.post_id] += 1
        return counts
