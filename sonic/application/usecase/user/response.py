"""User profile responses."""

from datetime import datetime

from sonic.application.usecase.base import ResponseModel
from sonic.domain.model import User
from sonic.domain.value import UserRole


class CurrentUserResponse(ResponseModel):
    """Full profile of the authenticated user."""

    id: str
    email: str
    display_name: str
    bio: str | None
    job_role: str | None
    interests: list[str]
    avatar_url: str | None
    role: UserRole
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "CurrentUserResponse":
        """Map a user to their own profile view."""
        return cls(
            id=str(user.id),
            email=user.email,
            display_name=user.display_name,
            bio=user.bio,
            job_role=user.job_role,
            interests=list(user.interests),
            avatar_url=user.avatar_url,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class PublicProfileResponse(ResponseModel):
    """Profile visible to everyone. Email and role are not exposed."""

    id: str
    display_name: str
    bio: str | None
    job_role: str | None
    avatar_url: str | None

    @classmethod
    def from_user(cls, user: User) -> "PublicProfileResponse":
        """Map a user to the public projection."""
        return cls(
            id=str(user.id),
            display_name=user.display_name,
            bio=user.bio,
            job_role=user.job_role,
            avatar_url=user.avatar_url,
        )
