"""Post aggregate root.

Posts are the primary content type in Sonic. Six post types exist; only
campaign posts carry a campaign goal and accept participants.
"""

from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

from pydantic import Field, field_validator, model_validator

from sonic.domain.error import ContentDeletedException
from sonic.domain.model.common import DomainModel, clean_optional, utc_now
from sonic.domain.value import PostId, PostType, UserId


def normalize_tags(tags: list[str] | None) -> list[str]:
    """Trim, lowercase and de-duplicate tags, dropping blanks.

    First occurrence order is kept.
    """
    normalized: list[str] = []
    for tag in tags or []:
        if tag is None:
            continue
        value = str(tag).strip().lower()
        if value and value not in normalized:
            normalized.append(value)
    return normalized


class Post(DomainModel):
    """Post aggregate root.

    Business rules:
    - Title and body are required and stored trimmed
    - Tags are a lowercase set
    - campaign_goal is always None unless the post is a campaign
    - Deleted posts cannot be edited or (un)featured
    """

    id: PostId
    type: PostType
    title: str
    body: str
    tags: list[str] = Field(default_factory=list)
    external_link: Optional[str] = None
    author_id: UserId
    campaign_goal: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    is_deleted: bool = False
    is_featured: bool = False

    @model_validator(mode="before")
    @classmethod
    def drop_campaign_goal_for_non_campaigns(cls, data: Any) -> Any:
        """Force campaign_goal to None when the post is not a campaign."""
        if isinstance(data, dict) and data.get("campaign_goal") is not None:
            try:
                post_type = PostType(data.get("type"))
            except ValueError:
                return data
            if not post_type.is_campaign:
                data = {**data, "campaign_goal": None}
        return data

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v: str | None) -> str:
        """Require a non-blank title."""
        if v is None or not str(v).strip():
            raise ValueError("Title is required.")
        return str(v).strip()

    @field_validator("body", mode="before")
    @classmethod
    def validate_body(cls, v: str | None) -> str:
        """Require a non-blank body."""
        if v is None or not str(v).strip():
            raise ValueError("Body is required.")
        return str(v).strip()

    @field_validator("tags", mode="before")
    @classmethod
    def validate_tags(cls, v: list[str] | None) -> list[str]:
        """Normalize tags."""
        return normalize_tags(v)

    @field_validator("external_link", "campaign_goal", mode="before")
    @classmethod
    def clean_optional_text(cls, v: str | None) -> str | None:
        """Trim optional text, blanks become None."""
        return clean_optional(v)

    @classmethod
    def create_new(
        cls,
        type: PostType,
        title: str,
        body: str,
        author_id: UserId,
        tags: list[str] | None = None,
        external_link: str | None = None,
        campaign_goal: str | None = None,
    ) -> "Post":
        """Create a new, active post."""
        now = utc_now()
        return cls(
            id=PostId(uuid4()),
            type=type,
            title=title,
            body=body,
            tags=tags or [],
            external_link=external_link,
            author_id=author_id,
            campaign_goal=campaign_goal,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_campaign(self) -> bool:
        """Whether this post is a campaign."""
        return self.type.is_campaign

    def can_be_modified_by(self, user_id: UserId, is_admin: bool) -> bool:
        """Authors and admins may update or delete a post."""
        return is_admin or self.author_id == user_id

    def update_content(
        self,
        title: str,
        body: str,
        tags: list[str] | None,
        external_link: str | None,
        campaign_goal: str | None,
    ) -> "Post":
        """Replace the editable content of the post.

        Raises:
            ContentDeletedException: If the post is deleted
        """
        if self.is_deleted:
            raise ContentDeletedException("Cannot update a deleted post.", "post.deleted")

        return self.with_changes(
            title=title,
            body=body,
            tags=tags or [],
            external_link=external_link,
            campaign_goal=campaign_goal,
            updated_at=utc_now(),
        )

    def mark_deleted(self) -> "Post":
        """Soft delete the post. Deleting twice is a no-op."""
        if self.is_deleted:
            return self
        return self.model_copy(update={"is_deleted": True, "updated_at": utc_now()})

    def set_featured(self, is_featured: bool) -> "Post":
        """Set the admin-controlled featured flag.

        Raises:
            ContentDeletedException: If the post is deleted
        """
        if self.is_deleted:
            raise ContentDeletedException(
                "Cannot change featured state of a deleted post.", "post.deleted"
            )
        return self.model_copy(
            update={"is_featured": is_featured, "updated_at": utc_now()}
        )
