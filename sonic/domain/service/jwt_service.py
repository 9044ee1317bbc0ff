"""JWT token domain service."""

from datetime import datetime

import logfire

from sonic.config import AuthSettings
from sonic.domain.model import User
from sonic.util.jwt import (
    TokenPayload,
    create_token,
    validate_auth_settings,
    verify_token,
)

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings

        Raises:
            ConfigurationError: If signing settings are unusable
        """
        validate_auth_settings(auth_settings)
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> tuple[str, datetime]:
        """Create an access token for a user.

        Args:
            user: Authenticated user

        Returns:
            JWT token string and its expiry (UTC)
        """
        with logfire.span("jwt_service.create_token", user_id=str(user.id)):
            token, expires_at = create_token(
                user_id=str(user.id),
                email=user.email,
                display_name=user.display_name,
                role=user.role.value,
                settings=self.auth_settings,
            )
            logfire.info("JWT token created", user_id=str(user.id))
            return token, expires_at

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.debug("JWT token verified", user_id=payload.user_id)
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
