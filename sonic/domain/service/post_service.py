"""Post domain service."""

import logfire

from sonic.domain.model.post import Post
from sonic.domain.repository import PostFeedFilter, PostRepository
from sonic.domain.value import PageRequest, PostId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def save_post(self, post: Post) -> Post:
        """Save a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.save_post", post_id=str(post.id), title=post.title
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=str(saved.id))
            return saved

    async def get_post_by_id(
        self, post_id: PostId, include_deleted: bool = False
    ) -> Post | None:
        """Get a post by ID.

        Soft-deleted posts are treated as absent unless include_deleted is set.

        Args:
            post_id: Post ID
            include_deleted: Whether to return soft-deleted posts

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(
                post_id, include_deleted=include_deleted
            )

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_feed(
        self, feed_filter: PostFeedFilter, page: PageRequest
    ) -> tuple[list[Post], int]:
        """Get one page of the feed and the total number of matching posts.

        Args:
            feed_filter: Feed filters
            page: Normalized pagination window

        Returns:
            Posts on the page (newest first) and the total count
        """
        with logfire.span(
            "post_service.get_feed",
            type=feed_filter.type.value if feed_filter.type else None,
            tags=feed_filter.tags,
            search=feed_filter.search,
            featured=feed_filter.featured,
            page=page.page,
            page_size=page.page_size,
        ):
            total = await self.post_repository.count(feed_filter)
            posts = await self.post_repository.find_feed(
                feed_filter, limit=page.page_size, offset=page.offset
            )
            logfire.info("Feed loaded", count=len(posts), total=total)
            return posts, total
