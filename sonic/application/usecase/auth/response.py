"""Authentication response shared by register and login."""

from datetime import datetime

from sonic.application.usecase.base import ResponseModel
from sonic.domain.model import User
from sonic.domain.value import UserRole


class AuthResponse(ResponseModel):
    """Issued access token and the identity it belongs to."""

    user_id: str
    email: str
    display_name: str
    role: UserRole
    access_token: str
    expires_at_utc: datetime

    @classmethod
    def for_user(cls, user: User, token: str, expires_at: datetime) -> "AuthResponse":
        """Build the response for an authenticated user."""
        return cls(
            user_id=str(user.id),
            email=user.email,
            display_name=user.display_name,
            role=user.role,
            access_token=token,
            expires_at_utc=expires_at,
        )
