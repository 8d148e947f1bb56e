"""Unit tests for UpdateUserUseCase and GetUserUseCase."""

from uuid import UUID

import pytest

from tests.harness import create_env_fixture
from threads.application.usecase.user import (
    GetUserRequest,
    GetUserUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
)
from threads.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    ValidationError,
)
from threads.domain.service import CommunityService
from threads.domain.value import UserId, Username


unit_env = create_env_fixture()


class TestUpdateUserUseCase:
    """Tests for onboarding and profile edits."""

    @pytest.mark.asyncio
    async def test_onboarding_creates_profile(self, unit_env):
        """First update creates the user, lowercases the username and onboards."""
        use_case = await unit_env.get(UpdateUserUseCase)

        profile = await use_case.execute(
            UpdateUserRequest(
                external_id="user_2abc",
                username="AdaL",
                name="Ada",
                bio="Poet of science",
                image="https://img.example/ada.png",
            )
        )

        assert profile.username == "adal"
        assert profile.onboarded is True
        assert profile.thread_ids == []
        assert profile.communities == []

    @pytest.mark.asyncio
    async def test_second_update_keeps_identity(self, unit_env):
        use_case = await unit_env.get(UpdateUserUseCase)
        first = await use_case.execute(
            UpdateUserRequest(external_id="user_2abc", username="ada", name="Ada")
        )

        second = await use_case.execute(
            UpdateUserRequest(
                external_id="user_2abc", username="ada", name="Ada", bio="Updated"
            )
        )

        assert second.id == first.id
        assert second.bio == "Updated"

    @pytest.mark.asyncio
    async def test_invalid_username_is_validation_error(self, unit_env):
        use_case = await unit_env.get(UpdateUserUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                UpdateUserRequest(external_id="user_2abc", username="a b", name="Ada")
            )

    @pytest.mark.asyncio
    async def test_taken_username(self, unit_env):
        use_case = await unit_env.get(UpdateUserUseCase)
        await use_case.execute(
            UpdateUserRequest(external_id="user_1", username="ada", name="Ada")
        )

        with pytest.raises(BusinessRuleViolationError):
            await use_case.execute(
                UpdateUserRequest(external_id="user_2", username="ada", name="Other")
            )


class TestGetUserUseCase:
    """Tests for fetching a profile."""

    @pytest.mark.asyncio
    async def test_profile_includes_communities(self, unit_env):
        # Arrange
        update = await unit_env.get(UpdateUserUseCase)
        get_user = await unit_env.get(GetUserUseCase)
        community_service = await unit_env.get(CommunityService)
        created = await update.execute(
            UpdateUserRequest(external_id="user_2abc", username="ada", name="Ada")
        )
        await community_service.create_community(
            Username("python"), "Python", None, None, UserId(UUID(created.id))
        )

        # Act
        profile = await get_user.execute(GetUserRequest(external_id="user_2abc"))

        # Assert
        assert [c.handle for c in profile.communities] == ["python"]

    @pytest.mark.asyncio
    async def test_unknown_external_id(self, unit_env):
        get_user = await unit_env.get(GetUserUseCase)

        with pytest.raises(NotFoundError):
            await get_user.execute(GetUserRequest(external_id="user_missing"))
