"""Domain value objects for Sonic.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from sonic.domain.value.common import ValueObject

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class PostType(str, Enum):
    """Kind of content a post carries.

    Only campaign posts accept participants and a campaign goal.
    """

    EXPERIENCE = "Experience"
    IDEA = "Idea"
    MODEL_GUIDE = "ModelGuide"
    COURSE = "Course"
    NEWS = "News"
    CAMPAIGN = "Campaign"

    @property
    def is_campaign(self) -> bool:
        """Whether posts of this type are campaigns."""
        return self is PostType.CAMPAIGN


class UserRole(str, Enum):
    """Authorization role of a user."""

    USER = "User"
    ADMIN = "Admin"

    @classmethod
    def is_admin_claim(cls, value: str | None) -> bool:
        """Check a role claim for admin, ignoring case."""
        return bool(value) and value.strip().lower() == cls.ADMIN.value.lower()


class PageRequest(ValueObject):
    """Normalized pagination window.

    Out-of-range values are corrected instead of rejected: page < 1 becomes 1,
    page_size <= 0 becomes the default and large sizes are capped.
    """

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @field_validator("page", mode="before")
    @classmethod
    def normalize_page(cls, v: int | None) -> int:
        """Clamp page to at least 1."""
        if v is None or int(v) < 1:
            return 1
        return int(v)

    @field_validator("page_size", mode="before")
    @classmethod
    def normalize_page_size(cls, v: int | None) -> int:
        """Default non-positive sizes and cap large ones."""
        if v is None or int(v) <= 0:
            return DEFAULT_PAGE_SIZE
        return min(int(v), MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        """Number of items to skip."""
        return (self.page - 1) * self.page_size

    def total_pages(self, total_items: int) -> int:
        """Number of pages needed for total_items."""
        if total_items <= 0:
            return 0
        return (total_items + self.page_size - 1) // self.page_size
