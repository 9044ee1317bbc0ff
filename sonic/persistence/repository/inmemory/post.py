"""In-memory post repository for testing."""

from typing import Optional

from sonic.domain.model.post import Post
from sonic.domain.repository.post import PostFeedFilter, PostRepository
from sonic.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    def _matches(self, post: Post, feed_filter: PostFeedFilter) -> bool:
        if post.is_deleted:
            return False
        if feed_filter.type is not None and post.type != feed_filter.type:
            return False
        if feed_filter.tags and not set(feed_filter.tags) & set(post.tags):
            return False
        if feed_filter.search:
            needle = feed_filter.search.lower()
            if needle not in post.title.lower() and needle not in post.body.lower():
                return False
        if (
            feed_filter.featured is not None
            and post.is_featured != feed_filter.featured
        ):
            return False
        return True

    async def find_by_id(
        self, post_id: PostId, include_deleted: bool = False
    ) -> Optional[Post]:
        """Find a post by ID."""
        post = self._posts.get(post_id)
        if post and post.is_deleted and not include_deleted:
            return None
        return post

    async def find_feed(
        self,
        feed_filter: PostFeedFilter,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        """Find non-deleted posts matching the filter, newest first."""
        posts = [p for p in self._posts.values() if self._matches(p, feed_filter)]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[offset : offset + limit]

    async def count(self, feed_filter: PostFeedFilter) -> int:
        """Count non-deleted posts matching the filter."""
        return sum(1 for p in self._posts.values() if self._matches(p, feed_filter))

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post
