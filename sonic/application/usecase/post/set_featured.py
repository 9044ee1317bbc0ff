"""Set featured status use case."""

import logfire
from pydantic import BaseModel

from sonic.application.usecase.base import BaseUseCase, parse_id
from sonic.domain.error import NotFoundError
from sonic.domain.service import PostService
from sonic.domain.value import PostId


class SetFeaturedRequest(BaseModel):
    """Set featured request. Admin-only, checked by the caller."""

    post_id: str  # UUID string
    is_featured: bool


class SetFeaturedUseCase(BaseUseCase):
    """Use case for featuring or unfeaturing a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize set featured use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: SetFeaturedRequest) -> None:
        """Execute set featured flow.

        Raises:
            NotFoundError: If the post does not exist
            ContentDeletedException: If the post is deleted
        """
        post_id = parse_id(request.post_id, PostId, "post")

        post = await self.post_service.get_post_by_id(post_id, include_deleted=True)
        if not post:
            raise NotFoundError("post", request.post_id)

        await self.post_service.save_post(post.set_featured(request.is_featured))
        logfire.info(
            "Post featured state changed",
            post_id=str(post_id),
            is_featured=request.is_featured,
        )
