"""In-memory comment repository for testing."""

from typing import Optional

from sonic.domain.model.comment import Comment
from sonic.domain.repository.comment import CommentRepository
from sonic.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def _visible_for_post(self, post_id: PostId) -> list[Comment]:
        comments = [
            c
            for c in self._comments.values()
            if c.post_id == post_id and not c.is_deleted
        ]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_by_id(
        self, comment_id: CommentId, include_deleted: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        comment = self._comments.get(comment_id)
        if comment and comment.is_deleted and not include_deleted:
            return None
        return comment

    async def find_by_post(
        self, post_id: PostId, limit: int = 10, offset: int = 0
    ) -> list[Comment]:
        """Find non-deleted comments for a post, oldest first."""
        return self._visible_for_post(post_id)[offset : offset + limit]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count non-deleted comments for a post."""
        return len(self._visible_for_post(post_id))

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment
