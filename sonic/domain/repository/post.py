"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import field_validator

from sonic.domain.model.post import Post, normalize_tags
from sonic.domain.model.common import clean_optional
from sonic.domain.value import PostId, PostType
from sonic.domain.value.common import ValueObject


class PostFeedFilter(ValueObject):
    """Filters for feed queries.

    All filters compose with AND. Deleted posts are never included.
    """

    type: Optional[PostType] = None
    tags: list[str] = []  # any-of match
    search: Optional[str] = None  # case-insensitive substring of title or body
    featured: Optional[bool] = None

    @field_validator("tags", mode="before")
    @classmethod
    def validate_tags(cls, v: list[str] | None) -> list[str]:
        """Match tags the way posts store them."""
        return normalize_tags(v)

    @field_validator("search", mode="before")
    @classmethod
    def validate_search(cls, v: str | None) -> str | None:
        """Blank search means no search."""
        return clean_optional(v)


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(
        self, post_id: PostId, include_deleted: bool = False
    ) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier
            include_deleted: Whether to return soft-deleted posts

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_feed(
        self,
        feed_filter: PostFeedFilter,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        """Find non-deleted posts, newest first.

        Args:
            feed_filter: Filters to apply
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, feed_filter: PostFeedFilter) -> int:
        """Count non-deleted posts matching the given filters.

        Args:
            feed_filter: Filters to apply

        Returns:
            Total number of posts matching the criteria
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or whole-row update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass
