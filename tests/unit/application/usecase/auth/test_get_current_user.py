"""Unit tests for GetCurrentUserUseCase."""

import pytest

from tests.conftest import make_user
from tests.harness import create_env_fixture
from threads.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from threads.domain.repository import UserRepository
from threads.domain.service import JWTService
from threads.util.jwt import JWTError

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_token_for_onboarded_user(unit_env):
    use_case = await unit_env.get(GetCurrentUserUseCase)
    jwt_service = await unit_env.get(JWTService)
    user_repo = await unit_env.get(UserRepository)
    ada = make_user("ada", external_id="user_2abc")
    await user_repo.save(ada)

    response = await use_case.execute(
        GetCurrentUserRequest(token=jwt_service.create_token("user_2abc"))
    )

    assert response.onboarded is True
    assert response.user.username == "ada"


@pytest.mark.asyncio
async def test_token_without_profile_needs_onboarding(unit_env):
    """A valid token with no profile yet resolves with onboarded=False."""
    use_case = await unit_env.get(GetCurrentUserUseCase)
    jwt_service = await unit_env.get(JWTService)

    response = await use_case.execute(
        GetCurrentUserRequest(token=jwt_service.create_token("user_new"))
    )

    assert response.external_id == "user_new"
    assert response.onboarded is False
    assert response.user is None


@pytest.mark.asyncio
async def test_invalid_token_raises_jwt_error(unit_env):
    use_case = await unit_env.get(GetCurrentUserUseCase)

    with pytest.raises(JWTError):
        await use_case.execute(GetCurrentUserRequest(token="garbage"))
