"""Comment domain service."""

import logfire

from sonic.domain.error import NotFoundError
from sonic.domain.model.comment import Comment
from sonic.domain.repository import CommentRepository
from sonic.domain.value import CommentId, PageRequest, PostId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self, post_id: PostId, author_id: UserId, body: str
    ) -> Comment:
        """Create a comment on a post.

        The caller is responsible for checking that the post exists.

        Args:
            post_id: Post ID
            author_id: Author user ID
            body: Comment text

        Returns:
            Created comment
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
        ):
            comment = Comment.create_new(post_id=post_id, author_id=author_id, body=body)
            saved = await self.comment_repository.save(comment)
            logfire.info("Comment created", comment_id=str(saved.id))
            return saved

    async def get_comment_by_id(
        self, comment_id: CommentId, include_deleted: bool = False
    ) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID
            include_deleted: Whether to return soft-deleted comments

        Returns:
            Comment if found, None otherwise
        """
        return await self.comment_repository.find_by_id(
            comment_id, include_deleted=include_deleted
        )

    async def get_comments_for_post(
        self, post_id: PostId, page: PageRequest
    ) -> tuple[list[Comment], int]:
        """Get one page of a post's comments, oldest first.

        Args:
            post_id: Post ID
            page: Normalized pagination window

        Returns:
            Comments on the page and the total number of comments
        """
        with logfire.span(
            "comment_service.get_comments_for_post",
            post_id=str(post_id),
            page=page.page,
            page_size=page.page_size,
        ):
            total = await self.comment_repository.count_by_post(post_id)
            comments = await self.comment_repository.find_by_post(
                post_id, limit=page.page_size, offset=page.offset
            )
            return comments, total

    async def update_body(self, comment_id: CommentId, body: str) -> Comment:
        """Edit a comment's body.

        Args:
            comment_id: Comment ID
            body: New body

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
            ContentDeletedException: If the comment is deleted
        """
        with logfire.span("comment_service.update_body", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(
                comment_id, include_deleted=True
            )
            if not comment:
                raise NotFoundError("comment", str(comment_id))

            updated = comment.update_body(body)
            saved = await self.comment_repository.save(updated)
            logfire.info("Comment body updated", comment_id=str(comment_id))
            return saved

    async def delete_comment(self, comment: Comment) -> Comment:
        """Soft delete a comment.

        Args:
            comment: Comment to delete

        Returns:
            Deleted comment
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment.id)):
            saved = await self.comment_repository.save(comment.mark_deleted())
            logfire.info("Comment deleted", comment_id=str(comment.id))
            return saved
