"""Base model for all domain entities."""

from datetime import datetime, timezone
from typing import Self
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def clean_optional(value: str | None) -> str | None:
    """Trim a string, turning blanks into None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def is_absolute_url(value: str) -> bool:
    """Whether value parses as an absolute URL with scheme and host."""
    parsed = urlparse(value)
    return bool(parsed.scheme) and bool(parsed.netloc)


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )

    def with_changes(self, **changes) -> Self:
        """Copy the model with changes applied, re-running validation.

        Unlike ``model_copy(update=...)`` the result goes through every
        validator again, so normalization rules hold for updated fields too.
        """
        return self.model_validate({**self.model_dump(), **changes})
