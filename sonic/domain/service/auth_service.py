"""Authentication domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from sonic.domain.error import ConflictError, NotAuthenticatedError
from sonic.domain.model import User
from sonic.domain.model.user import normalize_email
from sonic.domain.repository import UserRepository
from sonic.domain.value import UserRole
from sonic.util.password import hash_password, verify_password

from .base import Service

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password."


class AuthService(Service):
    """Domain service for email/password authentication.

    Raw passwords never leave this service: they are hashed before storage
    and only compared against stored hashes.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    def hash_password(self, password: str) -> str:
        """Hash a raw password for storage."""
        return hash_password(password)

    async def register(
        self,
        email: str,
        password: str,
        display_name: str,
        role: UserRole = UserRole.USER,
    ) -> User:
        """Create an account.

        Args:
            email: Email address (matched case-insensitively)
            password: Raw password
            display_name: Display name
            role: Role for the new account

        Returns:
            Created user

        Raises:
            ConflictError: If the email is already registered
        """
        normalized = normalize_email(email)
        with logfire.span("auth_service.register", email=normalized, role=role.value):
            existing = await self.user_repository.find_by_email(normalized)
            if existing:
                logfire.warn("Registration with existing email", email=normalized)
                raise ConflictError("Email is already in use.", "auth.email_in_use")

            user = User.create_new(
                email=normalized,
                password_hash=self.hash_password(password),
                display_name=display_name,
                role=role,
            )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                # Concurrent registration won the unique index
                logfire.warn("Duplicate email on insert", email=normalized)
                raise ConflictError("Email is already in use.", "auth.email_in_use")

            logfire.info("User registered", user_id=str(saved.id), role=role.value)
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check credentials and return the matching user.

        The same error is raised for unknown emails and wrong passwords so
        callers cannot probe which accounts exist.

        Raises:
            NotAuthenticatedError: If the credentials do not match
        """
        with logfire.span("auth_service.authenticate"):
            try:
                normalized = normalize_email(email)
            except ValueError:
                raise NotAuthenticatedError(
                    INVALID_CREDENTIALS_MESSAGE, "auth.invalid_credentials"
                )

            user = await self.user_repository.find_by_email(normalized)
            if not user or not verify_password(password, user.password_hash):
                logfire.warn("Login failed")
                raise NotAuthenticatedError(
                    INVALID_CREDENTIALS_MESSAGE, "auth.invalid_credentials"
                )

            logfire.info("User authenticated", user_id=str(user.id))
            return user
