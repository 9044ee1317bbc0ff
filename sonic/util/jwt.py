"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
from pydantic import BaseModel

from sonic.config import AuthSettings
from sonic.util.error import ConfigurationError

MIN_SECRET_LENGTH = 32
DEFAULT_TOKEN_MINUTES = 60


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: str
    email: str
    display_name: str | None = None
    role: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def validate_auth_settings(settings: AuthSettings) -> None:
    """Check that signing settings are usable.

    Args:
        settings: Authentication settings

    Raises:
        ConfigurationError: If the secret is too short or issuer/audience missing
    """
    if len(settings.jwt_secret or "") < MIN_SECRET_LENGTH:
        raise ConfigurationError(
            f"auth.jwt_secret must be at least {MIN_SECRET_LENGTH} characters"
        )
    if not settings.jwt_issuer:
        raise ConfigurationError("auth.jwt_issuer is required")
    if not settings.jwt_audience:
        raise ConfigurationError("auth.jwt_audience is required")


def token_lifetime(settings: AuthSettings) -> timedelta:
    """Access token lifetime, falling back to the default when misconfigured."""
    minutes = settings.access_token_minutes
    if minutes <= 0:
        minutes = DEFAULT_TOKEN_MINUTES
    return timedelta(minutes=minutes)


def create_token(
    user_id: str,
    email: str,
    display_name: str,
    role: str,
    settings: AuthSettings,
) -> tuple[str, datetime]:
    """Create a JWT token for the user.

    Args:
        user_id: User ID (stored as the subject)
        email: User email
        display_name: User display name
        role: User role name
        settings: Authentication settings

    Returns:
        Encoded JWT token and its expiry instant (UTC)
    """
    now = datetime.now(timezone.utc)
    expiry = now + token_lifetime(settings)

    payload = {
        "sub": user_id,
        "email": email,
        "name": display_name,
        "role": role,
        "jti": uuid4().hex,
        "iat": now,
        "nbf": now,
        "exp": expiry,
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
    }

    token = jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    return token, expiry


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            options={"require": ["sub", "exp", "iss", "aud"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    return TokenPayload(
        user_id=payload["sub"],
        email=payload.get("email", ""),
        display_name=payload.get("name"),
        role=payload.get("role", ""),
        exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
    )
