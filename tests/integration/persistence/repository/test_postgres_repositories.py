"""Integration tests for the PostgreSQL repositories.

Run against a migrated database (``python scripts/run_migrations.py``) with
``DATABASE__URL`` pointing at it. Skipped otherwise.
"""

import os
from uuid import uuid4

import pytest

from tests.conftest import make_community, make_thread, make_user
from tests.harness import create_env_fixture
from threads.domain.repository import (
    CommunityRepository,
    ThreadRepository,
    UserRepository,
)

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"), reason="DATABASE__URL not set"
)

# Integration test fixture - real persistence, assumes postgres running
integration_env = create_env_fixture(unmock={"persistence"})


def unique(prefix: str) -> str:
    return f"{prefix}{uuid4().hex[:8]}"


class TestPostgresRepositories:
    """Derived lists and searches against a real database."""

    @pytest.mark.asyncio
    async def test_derived_lists_round_trip(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        thread_repo = await integration_env.get(ThreadRepository)
        community_repo = await integration_env.get(CommunityRepository)
        ada = make_user(unique("ada"))
        await user_repo.save(ada)
        community = make_community(ada.id, handle=unique("py"))
        await community_repo.save(community)
        await community_repo.add_member(community.id, ada.id)
        post = make_thread(ada.id, text="Integration post", community_id=community.id)
        await thread_repo.save(post)
        reply = make_thread(ada.id, text="Integration reply", parent_id=post.id)
        await thread_repo.save(reply)

        # Act
        loaded_user = await user_repo.find_by_id(ada.id)
        loaded_post = await thread_repo.find_by_id(post.id)
        loaded_community = await community_repo.find_by_id(community.id)

        # Assert
        assert loaded_user.username == ada.username
        assert loaded_user.thread_ids == [post.id]
        assert loaded_user.community_ids == [community.id]
        assert loaded_post.child_ids == [reply.id]
        assert loaded_community.member_ids == [ada.id]
        assert loaded_community.thread_ids == [post.id]

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        marker = unique("m")
        literal = make_user(unique("u"), name=f"100% {marker}")
        other = make_user(unique("u"), name=f"1000 {marker}")
        await user_repo.save(literal)
        await user_repo.save(other)

        found = await user_repo.search(query=f"100% {marker}")

        assert [u.id for u in found] == [literal.id]

    @pytest.mark.asyncio
    async def test_delete_many_cascades_to_replies(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        thread_repo = await integration_env.get(ThreadRepository)
        ada = make_user(unique("ada"))
        await user_repo.save(ada)
        post = make_thread(ada.id, text="Soon gone")
        reply = make_thread(ada.id, text="Also gone", parent_id=post.id)
        await thread_repo.save(post)
        await thread_repo.save(reply)

        await thread_repo.delete_many([post.id, reply.id])

        assert await thread_repo.find_by_id(reply.id) is None
