"""Unit tests for the profile read use cases."""

from uuid import uuid4

import pytest

from sonic.application.usecase.user import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
)
from sonic.domain.error import NotAuthenticatedError, NotFoundError
from sonic.domain.repository import UserRepository
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetUserProfileUseCase:
    """Tests for GetUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_public_profile_hides_private_fields(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user().with_changes(bio="Hi there"))
        use_case = await unit_env.get(GetUserProfileUseCase)

        # Act
        response = await use_case.execute(GetUserProfileRequest(user_id=str(user.id)))
        data = response.model_dump(by_alias=True)

        # Assert
        assert data["displayName"] == "Alice"
        assert data["bio"] == "Hi there"
        assert "email" not in data
        assert "role" not in data

    @pytest.mark.asyncio
    @pytest.mark.parametrize("user_id", [str(uuid4()), "nope"])
    async def test_unknown_user(self, unit_env, user_id):
        use_case = await unit_env.get(GetUserProfileUseCase)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(GetUserProfileRequest(user_id=user_id))

        assert exc_info.value.code == "user.not_found"


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_current_user(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())
        use_case = await unit_env.get(GetCurrentUserUseCase)

        # Act
        response = await use_case.execute(GetCurrentUserRequest(user_id=str(user.id)))

        # Assert
        assert response.id == str(user.id)
        assert response.email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_malformed_subject(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(NotAuthenticatedError) as exc_info:
            await use_case.execute(GetCurrentUserRequest(user_id="not-a-uuid"))

        assert exc_info.value.code == "auth.missing_sub"
