"""User aggregate root.

Users register with email and password. Profile fields are optional;
the role decides whether a user may moderate content.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from pydantic import Field, field_validator

from sonic.domain.model.common import (
    DomainModel,
    clean_optional,
    is_absolute_url,
    utc_now,
)
from sonic.domain.value import UserId, UserRole

MAX_EMAIL_LENGTH = 320
MAX_DISPLAY_NAME_LENGTH = 100
MAX_BIO_LENGTH = 1000
MAX_JOB_ROLE_LENGTH = 200
MAX_INTEREST_LENGTH = 100


def normalize_email(email: str | None) -> str:
    """Trim and lowercase an email address.

    Raises:
        ValueError: If the address is blank, has no ``@`` or is too long
    """
    value = (email or "").strip().lower()
    if not value:
        raise ValueError("Email is required.")
    if "@" not in value:
        raise ValueError("Email is invalid.")
    if len(value) > MAX_EMAIL_LENGTH:
        raise ValueError(f"Email must be at most {MAX_EMAIL_LENGTH} characters.")
    return value


def normalize_interests(interests: list[str] | None) -> list[str]:
    """Trim interests, drop blanks and de-duplicate ignoring case."""
    normalized: list[str] = []
    seen: set[str] = set()
    for interest in interests or []:
        value = (interest or "").strip()
        if not value:
            continue
        if len(value) > MAX_INTEREST_LENGTH:
            raise ValueError(
                f"Interests must be at most {MAX_INTEREST_LENGTH} characters each."
            )
        key = value.casefold()
        if key not in seen:
            seen.add(key)
            normalized.append(value)
    return normalized


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    email: str
    password_hash: str
    display_name: str = Field(max_length=MAX_DISPLAY_NAME_LENGTH)
    bio: Optional[str] = Field(default=None, max_length=MAX_BIO_LENGTH)
    job_role: Optional[str] = Field(default=None, max_length=MAX_JOB_ROLE_LENGTH)
    interests: list[str] = Field(default_factory=list)
    avatar_url: Optional[str] = None
    role: UserRole = UserRole.USER
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v: str | None) -> str:
        """Normalize email."""
        return normalize_email(v)

    @field_validator("password_hash", mode="before")
    @classmethod
    def validate_password_hash(cls, v: str | None) -> str:
        """Require a password hash."""
        if not v or not str(v).strip():
            raise ValueError("Password hash is required.")
        return v

    @field_validator("display_name", mode="before")
    @classmethod
    def validate_display_name(cls, v: str | None) -> str:
        """Require a non-blank display name."""
        if v is None or not str(v).strip():
            raise ValueError("Display name is required.")
        return str(v).strip()

    @field_validator("bio", "job_role", mode="before")
    @classmethod
    def clean_optional_text(cls, v: str | None) -> str | None:
        """Trim optional text, blanks become None."""
        return clean_optional(v)

    @field_validator("interests", mode="before")
    @classmethod
    def validate_interests(cls, v: list[str] | None) -> list[str]:
        """Normalize interests."""
        return normalize_interests(v)

    @field_validator("avatar_url", mode="before")
    @classmethod
    def validate_avatar_url(cls, v: str | None) -> str | None:
        """Avatar URL must be absolute when present."""
        value = clean_optional(v)
        if value is not None and not is_absolute_url(value):
            raise ValueError("Avatar URL must be an absolute URL.")
        return value

    @classmethod
    def create_new(
        cls,
        email: str,
        password_hash: str,
        display_name: str,
        role: UserRole = UserRole.USER,
    ) -> "User":
        """Create a new user."""
        now = utc_now()
        return cls(
            id=UserId(uuid4()),
            email=email,
            password_hash=password_hash,
            display_name=display_name,
            role=role,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_admin(self) -> bool:
        """Whether the user holds the admin role."""
        return self.role is UserRole.ADMIN

    def update_profile(
        self,
        display_name: str,
        bio: str | None,
        job_role: str | None,
        interests: list[str] | None,
        avatar_url: str | None,
    ) -> "User":
        """Replace the editable profile fields."""
        return self.with_changes(
            display_name=display_name,
            bio=bio,
            job_role=job_role,
            interests=interests or [],
            avatar_url=avatar_url,
            updated_at=utc_now(),
        )

    def set_password_hash(self, password_hash: str) -> "User":
        """Replace the stored password hash."""
        return self.with_changes(password_hash=password_hash, updated_at=utc_now())

    def promote_to_admin(self) -> "User":
        """Grant the admin role."""
        if self.is_admin:
            return self
        return self.model_copy(update={"role": UserRole.ADMIN, "updated_at": utc_now()})
