"""PostgreSQL implementation of Like repository."""

from typing import Sequence

import logfire
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from sonic.domain.model import Like
from sonic.domain.repository import LikeRepository
from sonic.domain.value import PostId, UserId
from sonic.persistence.mappers import like_to_dict
from sonic.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether the user likes the post."""
        stmt = select(likes_table.c.id).where(
            likes_table.c.post_id == post_id, likes_table.c.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def save(self, like: Like) -> Like:
        """Insert a like.

        The insert runs in a savepoint so a unique violation leaves the
        request transaction usable.

        Raises:
            IntegrityError: If the user already likes the post
        """
        with logfire.span(
            "like_repository.save",
            post_id=str(like.post_id),
            user_id=str(like.user_id),
        ):
            async with self.session.begin_nested():
                await self.session.execute(
                    likes_table.insert().values(**like_to_dict(like))
                )
            return like

    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete the user's like on a post, if any."""
        stmt = delete(likes_table).where(
            likes_table.c.post_id == post_id, likes_table.c.user_id == user_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return (result.rowcount or 0) > 0

    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(likes_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count likes for several posts in a single query.

        Posts without likes are reported with a count of zero.
        """
        counts: dict[PostId, int] = {post_id: 0 for post_id in post_ids}
        if not post_ids:
            return counts

        stmt = (
            select(likes_table.c.post_id, func.count().label("like_count"))
            .where(likes_table.c.post_id.in_(list(post_ids)))
            .group_by(likes_table.c.post_id)
        )
        result = await self.session.execute(stmt)
        for row in result.all():
            counts[PostId(row.post_id)] = row.like_count
        return counts
