"""Comment response shared by the comment use cases."""

from datetime import datetime

from sonic.application.usecase.base import ResponseModel
from sonic.domain.model import Comment


class CommentResponse(ResponseModel):
    """Comment with its author's display name."""

    id: str
    post_id: str
    author_id: str
    author_display_name: str | None
    body: str
    created_at: datetime
    updated_at: datetime | None

    @classmethod
    def from_comment(
        cls, comment: Comment, author_display_name: str | None
    ) -> "CommentResponse":
        """Map a comment to a response."""
        return cls(
            id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            author_display_name=author_display_name,
            body=comment.body,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
