"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from threads.config import Settings
from threads.domain.model import Community, Thread, User
from threads.domain.value import (
    CommunityId,
    ExternalId,
    ThreadId,
    UserId,
    Username,
)
from threads.interface.api.app import create_app
from threads.util.jwt import create_token
from tests.di import build_test_container

# Fixed base time so ordering assertions don't depend on the clock
BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_user(
    username: str = "ada",
    name: str = "Ada Lovelace",
    external_id: str | None = None,
    onboarded: bool = True,
    minutes: int = 0,
) -> User:
    """Build a user entity for tests."""
    return User(
        id=UserId(uuid4()),
        external_id=ExternalId(external_id or f"ext-{username}"),
        username=Username(username),
        name=name,
        onboarded=onboarded,
        created_at=BASE_TIME + timedelta(minutes=minutes),
        updated_at=BASE_TIME + timedelta(minutes=minutes),
    )


def make_thread(
    author_id: UserId,
    text: str = "Hello threads",
    parent_id: ThreadId | None = None,
    community_id: CommunityId | None = None,
    minutes: int = 0,
) -> Thread:
    """Build a thread entity for tests."""
    return Thread(
        id=ThreadId(uuid4()),
        text=text,
        author_id=author_id,
        parent_id=parent_id,
        community_id=community_id,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


def make_community(
    created_by: UserId,
    handle: str = "python",
    name: str = "Python",
    minutes: int = 0,
) -> Community:
    """Build a community entity for tests."""
    return Community(
        id=CommunityId(uuid4()),
        handle=Username(handle),
        name=name,
        created_by=created_by,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


def auth_headers(external_id: str) -> dict[str, str]:
    """Authorization header carrying a token for the external id."""
    return {"Authorization": f"Bearer {create_token(external_id, Settings().auth)}"}


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    app_instance = create_app(build_test_container())
    with TestClient(app_instance) as test_client:
        yield test_client


@pytest.fixture
def onboard(client):
    """Onboard a user through the API and return their auth headers."""

    def _onboard(username: str, name: str | None = None) -> dict[str, str]:
        headers = auth_headers(f"ext-{username}")
        response = client.put(
            "/users/me",
            json={"username": username, "name": name or username.title()},
            headers=headers,
        )
        assert response.status_code == 200, response.text
        return headers

    return _onboard
