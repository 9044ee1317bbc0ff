"""Seed admin use case."""

from enum import Enum

import logfire

from sonic.application.usecase.base import BaseUseCase
from sonic.config import AdminSeedSettings
from sonic.domain.service import AuthService, UserService
from sonic.domain.value import UserRole
from sonic.util.error import ConfigurationError

MIN_PASSWORD_LENGTH = 8


class SeedOutcome(str, Enum):
    """What the admin seed did."""

    DISABLED = "disabled"
    CREATED = "created"
    PROMOTED = "promoted"
    PASSWORD_RESET = "password_reset"
    UNCHANGED = "unchanged"


class SeedAdminUseCase(BaseUseCase):
    """Use case for bootstrapping the admin account at startup.

    Runs once per process start. An existing non-admin account with the
    seed email is only promoted when promote_existing_user is set;
    otherwise it is reported as a configuration error.
    """

    def __init__(
        self,
        auth_service: AuthService,
        user_service: UserService,
        settings: AdminSeedSettings,
    ) -> None:
        """Initialize seed admin use case.

        Args:
            auth_service: Authentication domain service
            user_service: User domain service
            settings: Admin seed settings
        """
        self.auth_service = auth_service
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: None = None) -> SeedOutcome:
        """Execute admin seed.

        Returns:
            What was done

        Raises:
            ConfigurationError: If the seed settings are incomplete, or the
                email belongs to a non-admin user and promotion
                is not enabled
        """
        if not self.settings.enabled:
            logfire.debug("Admin seed disabled")
            return SeedOutcome.DISABLED

        email = (self.settings.email or "").strip()
        password = self.settings.password or ""
        if not email:
            raise ConfigurationError("admin_seed.email is required when enabled")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ConfigurationError(
                f"admin_seed.password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        with logfire.span("seed_admin.execute", email=email):
            existing = await self.user_service.get_by_email(email)

            if not existing:
                user = await self.auth_service.register(
                    email=email,
                    password=password,
                    display_name=self.settings.display_name,
                    role=UserRole.ADMIN,
                )
                logfire.info("Admin account created", user_id=str(user.id))
                return SeedOutcome.CREATED

            if not existing.is_admin:
                if not self.settings.promote_existing_user:
                    raise ConfigurationError(
                        f"admin_seed.email {email} belongs to a non-admin user"
                    )
                existing = await self.user_service.save_user(
                    existing.promote_to_admin()
                )
                logfire.info("Existing user promoted to admin", user_id=str(existing.id))
                if not self.settings.reset_password_on_startup:
                    return SeedOutcome.PROMOTED

            if self.settings.reset_password_on_startup:
                await self.user_service.save_user(
                    existing.set_password_hash(self.auth_service.hash_password(password))
                )
                logfire.info("Admin password reset", user_id=str(existing.id))
                return SeedOutcome.PASSWORD_RESET

            logfire.info("Admin account already present", user_id=str(existing.id))
            return SeedOutcome.UNCHANGED
