"""Delete post use case."""

import logfire
from pydantic import BaseModel

from sonic.application.usecase.base import BaseUseCase, parse_id, parse_user_id
from sonic.domain.error import NotAuthorizedError, NotFoundError
from sonic.domain.service import PostService
from sonic.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    is_admin: bool = False


class DeletePostUseCase(BaseUseCase):
    """Use case for soft deleting a post (author or admin).

    Likes and campaign participations of the post are kept.
    """

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post is missing or already deleted
            NotAuthorizedError: If the caller is neither author nor admin
        """
        post_id = parse_id(request.post_id, PostId, "post")
        user_id = parse_user_id(request.user_id)

        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("post", request.post_id)

        if not post.can_be_modified_by(user_id, request.is_admin):
            logfire.warn(
                "Unauthorized post delete attempt",
                post_id=str(post_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError(
                "You are not allowed to delete this post.", "post.forbidden_delete"
            )

        await self.post_service.save_post(post.mark_deleted())
        logfire.info(
            "Post deleted",
            post_id=str(post_id),
            user_id=str(user_id),
            by_admin=request.is_admin,
        )
