"""Unit tests for SeedAdminUseCase."""

import pytest

from sonic.application.usecase.admin import SeedAdminUseCase, SeedOutcome
from sonic.config import AdminSeedSettings
from sonic.domain.repository import UserRepository
from sonic.domain.service import AuthService, UserService
from sonic.domain.value import UserRole
from sonic.util.error import ConfigurationError
from sonic.util.password import verify_password
from tests.conftest import TEST_PASSWORD, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

ADMIN_EMAIL = "root@example.com"
ADMIN_PASSWORD = "s3cret-admin-pass"


async def _seed_use_case(unit_env, **overrides) -> SeedAdminUseCase:
    """Build the use case with explicit seed settings."""
    settings = AdminSeedSettings(
        **{
            "enabled": True,
            "email": ADMIN_EMAIL,
            "password": ADMIN_PASSWORD,
            **overrides,
        }
    )
    return SeedAdminUseCase(
        auth_service=await unit_env.get(AuthService),
        user_service=await unit_env.get(UserService),
        settings=settings,
    )


class TestSeedAdminUseCase:
    """Tests for SeedAdminUseCase."""

    @pytest.mark.asyncio
    async def test_disabled(self, unit_env):
        use_case = await _seed_use_case(unit_env, enabled=False)

        assert await use_case.execute() is SeedOutcome.DISABLED

    @pytest.mark.asyncio
    async def test_creates_admin_then_unchanged(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        use_case = await _seed_use_case(unit_env)

        # Act
        first = await use_case.execute()
        second = await use_case.execute()

        # Assert
        assert first is SeedOutcome.CREATED
        assert second is SeedOutcome.UNCHANGED
        admin = await user_repo.find_by_email(ADMIN_EMAIL)
        assert admin.role is UserRole.ADMIN
        assert verify_password(ADMIN_PASSWORD, admin.password_hash)

    @pytest.mark.asyncio
    async def test_existing_user_without_promotion_fails(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user(ADMIN_EMAIL, "Root"))
        use_case = await _seed_use_case(unit_env)

        # Act & Assert
        with pytest.raises(ConfigurationError):
            await use_case.execute()
        stored = await user_repo.find_by_email(ADMIN_EMAIL)
        assert stored.role is UserRole.USER

    @pytest.mark.asyncio
    async def test_promotes_existing_user(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user(ADMIN_EMAIL, "Root"))
        use_case = await _seed_use_case(unit_env, promote_existing_user=True)

        # Act
        outcome = await use_case.execute()

        # Assert
        assert outcome is SeedOutcome.PROMOTED
        stored = await user_repo.find_by_id(user.id)
        assert stored.role is UserRole.ADMIN
        # Password untouched without reset
        assert verify_password(TEST_PASSWORD, stored.password_hash)

    @pytest.mark.asyncio
    async def test_resets_password(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user(ADMIN_EMAIL, "Root", role=UserRole.ADMIN))
        use_case = await _seed_use_case(unit_env, reset_password_on_startup=True)

        # Act
        outcome = await use_case.execute()

        # Assert
        assert outcome is SeedOutcome.PASSWORD_RESET
        stored = await user_repo.find_by_email(ADMIN_EMAIL)
        assert verify_password(ADMIN_PASSWORD, stored.password_hash)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides", [{"email": "  "}, {"password": "short"}, {"password": None}]
    )
    async def test_incomplete_settings(self, unit_env, overrides):
        use_case = await _seed_use_case(unit_env, **overrides)

        with pytest.raises(ConfigurationError):
            await use_case.execute()
