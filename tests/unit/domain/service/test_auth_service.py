"""Unit tests for AuthService."""

import pytest

from sonic.domain.error import ConflictError, NotAuthenticatedError
from sonic.domain.repository import UserRepository
from sonic.domain.service import AuthService
from sonic.domain.value import UserRole
from sonic.util.password import verify_password
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegister:
    """Tests for account creation."""

    @pytest.mark.asyncio
    async def test_register_hashes_password(self, unit_env):
        """The stored hash verifies and is not the raw password."""
        # Arrange
        auth_service = await unit_env.get(AuthService)

        # Act
        user = await auth_service.register("Bob@Example.com", "pa55word!", "Bob")

        # Assert
        assert user.email == "bob@example.com"
        assert user.role is UserRole.USER
        assert user.password_hash != "pa55word!"
        assert verify_password("pa55word!", user.password_hash)

    @pytest.mark.asyncio
    async def test_duplicate_email_ignores_case(self, unit_env):
        """A second account with the same email in another case conflicts."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        user_repo = await unit_env.get(UserRepository)
        first = await auth_service.register("bob@example.com", "pa55word!", "Bob")

        # Act
        with pytest.raises(ConflictError) as exc_info:
            await auth_service.register("BOB@example.com", "other-pass", "Bobby")

        # Assert
        assert exc_info.value.code == "auth.email_in_use"
        stored = await user_repo.find_by_email("bob@example.com")
        assert stored.id == first.id
        assert stored.display_name == "Bob"


class TestAuthenticate:
    """Tests for credential checks."""

    @pytest.mark.asyncio
    async def test_valid_credentials(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        registered = await auth_service.register("bob@example.com", "pa55word!", "Bob")

        # Act
        user = await auth_service.authenticate(" BOB@example.com ", "pa55word!")

        # Assert
        assert user.id == registered.id

    @pytest.mark.asyncio
    async def test_unknown_email_and_wrong_password_look_the_same(self, unit_env):
        """Both failures use the same code and message."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("bob@example.com", "pa55word!", "Bob")

        # Act
        with pytest.raises(NotAuthenticatedError) as unknown:
            await auth_service.authenticate("nobody@example.com", "pa55word!")
        with pytest.raises(NotAuthenticatedError) as wrong:
            await auth_service.authenticate("bob@example.com", "wrong-pass")

        # Assert
        assert unknown.value.code == wrong.value.code == "auth.invalid_credentials"
        assert unknown.value.message == wrong.value.message
