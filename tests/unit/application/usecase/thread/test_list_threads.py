"""Unit tests for ListThreadsUseCase and ListUserThreadsUseCase."""

import pytest

from tests.conftest import make_community, make_thread, make_user
from tests.harness import create_env_fixture
from threads.application.usecase.thread import (
    ListThreadsRequest,
    ListThreadsUseCase,
    ListUserThreadsRequest,
    ListUserThreadsUseCase,
)
from threads.domain.error import NotFoundError
from threads.domain.repository import (
    CommunityRepository,
    ThreadRepository,
    UserRepository,
)

unit_env = create_env_fixture()


class TestListThreadsUseCase:
    """Tests for the home feed."""

    @pytest.mark.asyncio
    async def test_cards_are_populated(self, unit_env):
        """Each card carries author, community and direct replies with authors."""
        # Arrange
        use_case = await unit_env.get(ListThreadsUseCase)
        user_repo = await unit_env.get(UserRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        community_repo = await unit_env.get(CommunityRepository)
        ada, bob = make_user("ada"), make_user("bob", minutes=1)
        await user_repo.save(ada)
        await user_repo.save(bob)
        community = make_community(ada.id)
        await community_repo.save(community)
        post = make_thread(ada.id, text="Post in python", community_id=community.id)
        reply = make_thread(bob.id, text="Nice post", parent_id=post.id, minutes=1)
        nested = make_thread(ada.id, text="Thanks bob", parent_id=reply.id, minutes=2)
        for thread in (post, reply, nested):
            await thread_repo.save(thread)

        # Act
        response = await use_case.execute(ListThreadsRequest())

        # Assert
        assert response.is_next is False
        assert len(response.threads) == 1
        card = response.threads[0]
        assert card.author.username == "ada"
        assert card.community.handle == "python"
        assert card.reply_count == 1
        assert card.replies[0].author.username == "bob"

    @pytest.mark.asyncio
    async def test_pagination(self, unit_env):
        use_case = await unit_env.get(ListThreadsUseCase)
        user_repo = await unit_env.get(UserRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        ada = make_user("ada")
        await user_repo.save(ada)
        posts = [make_thread(ada.id, text=f"Post {i}", minutes=i) for i in range(3)]
        for post in posts:
            await thread_repo.save(post)

        first = await use_case.execute(ListThreadsRequest(page_number=1, page_size=2))
        second = await use_case.execute(ListThreadsRequest(page_number=2, page_size=2))

        assert [c.text for c in first.threads] == ["Post 2", "Post 1"]
        assert first.is_next is True
        assert [c.text for c in second.threads] == ["Post 0"]
        assert second.is_next is False

    @pytest.mark.asyncio
    async def test_empty_feed(self, unit_env):
        use_case = await unit_env.get(ListThreadsUseCase)

        response = await use_case.execute(ListThreadsRequest())

        assert response.threads == []
        assert response.is_next is False


class TestListUserThreadsUseCase:
    """Tests for a user's profile threads."""

    @pytest.mark.asyncio
    async def test_only_top_level_threads_newest_first(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListUserThreadsUseCase)
        user_repo = await unit_env.get(UserRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        ada = make_user("ada")
        await user_repo.save(ada)
        old = make_thread(ada.id, text="Old post")
        new = make_thread(ada.id, text="New post", minutes=5)
        reply = make_thread(ada.id, text="Own reply", parent_id=old.id, minutes=6)
        for thread in (old, new, reply):
            await thread_repo.save(thread)

        # Act
        response = await use_case.execute(
            ListUserThreadsRequest(external_id=ada.external_id.root)
        )

        # Assert
        assert response.user.username == "ada"
        assert [c.text for c in response.threads] == ["New post", "Old post"]
        assert response.threads[1].reply_count == 1

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        use_case = await unit_env.get(ListUserThreadsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ListUserThreadsRequest(external_id="ext-nobody"))
