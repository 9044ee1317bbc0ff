"""Comment entity.

Comments are flat replies to a post, listed oldest-first.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from pydantic import Field, field_validator

from sonic.domain.error import ContentDeletedException
from sonic.domain.model.common import DomainModel, utc_now
from sonic.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    updated_at stays None until the body is edited or the comment deleted.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    body: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: Optional[datetime] = None
    is_deleted: bool = False

    @field_validator("body", mode="before")
    @classmethod
    def validate_body(cls, v: str | None) -> str:
        """Require a non-blank body."""
        if v is None or not str(v).strip():
            raise ValueError("Comment body is required.")
        return str(v).strip()

    @classmethod
    def create_new(cls, post_id: PostId, author_id: UserId, body: str) -> "Comment":
        """Create a new comment."""
        return cls(
            id=CommentId(uuid4()),
            post_id=post_id,
            author_id=author_id,
            body=body,
            created_at=utc_now(),
        )

    def can_be_deleted_by(self, user_id: UserId, is_admin: bool) -> bool:
        """Authors and admins may delete a comment."""
        return is_admin or self.author_id == user_id

    def update_body(self, body: str) -> "Comment":
        """Replace the comment body.

        Raises:
            ContentDeletedException: If the comment is deleted
        """
        if self.is_deleted:
            raise ContentDeletedException(
                "Cannot edit a deleted comment.", "comment.deleted"
            )
        return self.with_changes(body=body, updated_at=utc_now())

    def mark_deleted(self) -> "Comment":
        """Soft delete the comment. Deleting twice is a no-op."""
        if self.is_deleted:
            return self
        return self.model_copy(update={"is_deleted": True, "updated_at": utc_now()})
