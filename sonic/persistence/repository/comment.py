"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from sonic.domain.model import Comment
from sonic.domain.repository import CommentRepository
from sonic.domain.value import CommentId, PostId
from sonic.persistence.mappers import comment_to_dict, row_to_comment
from sonic.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, comment_id: CommentId, include_deleted: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        if not include_deleted:
            stmt = stmt.where(comments_table.c.is_deleted.is_(False))

        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_post(
        self, post_id: PostId, limit: int = 10, offset: int = 0
    ) -> List[Comment]:
        """Find non-deleted comments for a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(
                comments_table.c.post_id == post_id,
                comments_table.c.is_deleted.is_(False),
            )
            .order_by(comments_table.c.created_at, comments_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count non-deleted comments for a post."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(
                comments_table.c.post_id == post_id,
                comments_table.c.is_deleted.is_(False),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        exists_stmt = select(comments_table.c.id).where(
            comments_table.c.id == comment.id
        )
        existing = (await self.session.execute(exists_stmt)).first()

        comment_dict = comment_to_dict(comment)

        if existing:
            # Identity and ownership never change
            updatable = {
                k: v
                for k, v in comment_dict.items()
                if k not in {"id", "post_id", "author_id", "created_at"}
            }
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**updatable)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment
