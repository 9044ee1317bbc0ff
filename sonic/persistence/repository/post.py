"""PostgreSQL implementation of Post repository."""

from typing import Any, List, Optional

import logfire
from sqlalchemy import desc, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from sonic.domain.model import Post
from sonic.domain.repository.post import PostFeedFilter, PostRepository
from sonic.domain.value import PostId
from sonic.persistence.mappers import post_to_dict, row_to_post
from sonic.persistence.tables import posts_table


def _like_pattern(search: str) -> str:
    """Substring pattern for ILIKE with wildcards in the input escaped."""
    escaped = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _apply_filter(self, stmt: Any, feed_filter: PostFeedFilter) -> Any:
        """Apply feed filters to a select statement."""
        stmt = stmt.where(posts_table.c.is_deleted.is_(False))

        if feed_filter.type is not None:
            stmt = stmt.where(posts_table.c.type == feed_filter.type.value)

        if feed_filter.tags:
            # Any-of match, served by the GIN index
            stmt = stmt.where(posts_table.c.tags.overlap(feed_filter.tags))

        if feed_filter.search:
            pattern = _like_pattern(feed_filter.search)
            stmt = stmt.where(
                or_(
                    posts_table.c.title.ilike(pattern, escape="\\"),
                    posts_table.c.body.ilike(pattern, escape="\\"),
                )
            )

        if feed_filter.featured is not None:
            stmt = stmt.where(posts_table.c.is_featured.is_(feed_filter.featured))

        return stmt

    async def find_by_id(
        self, post_id: PostId, include_deleted: bool = False
    ) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            if not include_deleted:
                stmt = stmt.where(posts_table.c.is_deleted.is_(False))

            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if not row:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            return row_to_post(dict(row))

    async def find_feed(
        self,
        feed_filter: PostFeedFilter,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find non-deleted posts matching the filter, newest first."""
        with logfire.span(
            "post_repository.find_feed",
            type=feed_filter.type.value if feed_filter.type else None,
            tags=feed_filter.tags,
            search=feed_filter.search,
            featured=feed_filter.featured,
            limit=limit,
            offset=offset,
        ):
            stmt = self._apply_filter(select(posts_table), feed_filter)
            stmt = (
                stmt.order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
                .limit(limit)
                .offset(offset)
            )

            result = await self.session.execute(stmt)
            posts = [row_to_post(dict(row)) for row in result.mappings().all()]

            logfire.debug("Feed page loaded", count=len(posts))
            return posts

    async def count(self, feed_filter: PostFeedFilter) -> int:
        """Count non-deleted posts matching the filter."""
        stmt = self._apply_filter(
            select(func.count()).select_from(posts_table), feed_filter
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            exists_stmt = select(posts_table.c.id).where(posts_table.c.id == post.id)
            existing = (await self.session.execute(exists_stmt)).first()

            post_dict = post_to_dict(post)

            if existing:
                stmt = (
                    posts_table.update()
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
            else:
                stmt = posts_table.insert().values(**post_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return post
