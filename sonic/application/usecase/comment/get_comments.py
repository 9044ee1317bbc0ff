"""Get comments use case."""

from pydantic import BaseModel

from sonic.application.usecase.base import BaseUseCase, PagedResponse, parse_id
from sonic.domain.error import NotFoundError
from sonic.domain.service import CommentService, PostService, UserService
from sonic.domain.value import PageRequest, PostId

from .response import CommentResponse


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string
    page: int = 1
    page_size: int = 10


class GetCommentsUseCase(BaseUseCase):
    """Use case for listing a post's comments, oldest first."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(
        self, request: GetCommentsRequest
    ) -> PagedResponse[CommentResponse]:
        """Execute get comments flow.

        Display names are resolved once per distinct author on the page.

        Args:
            request: Post ID and page

        Returns:
            Page of non-deleted comments

        Raises:
            NotFoundError: If the post is missing or deleted
        """
        post_id = parse_id(request.post_id, PostId, "post")
        if not await self.post_service.get_post_by_id(post_id):
            raise NotFoundError("post", request.post_id)

        page = PageRequest(page=request.page, page_size=request.page_size)

        comments, total = await self.comment_service.get_comments_for_post(
            post_id, page
        )
        display_names = await self.user_service.get_display_names(
            [comment.author_id for comment in comments]
        )

        items = [
            CommentResponse.from_comment(comment, display_names.get(comment.author_id))
            for comment in comments
        ]
        return PagedResponse[CommentResponse].build(items, page, total)
