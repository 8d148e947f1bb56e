"""Unit tests for GetThreadUseCase and ReplyToThreadUseCase."""

from uuid import uuid4

import pytest

from tests.conftest import make_community, make_thread, make_user
from tests.harness import create_env_fixture
from threads.application.usecase.thread import (
    GetThreadRequest,
    GetThreadUseCase,
    ReplyToThreadRequest,
    ReplyToThreadUseCase,
)
from threads.config import ThreadSettings
from threads.domain.error import NotFoundError
from threads.domain.repository import (
    CommunityRepository,
    ThreadRepository,
    UserRepository,
)
from threads.domain.service import CommunityService, ThreadService, UserService

unit_env = create_env_fixture()


class TestGetThreadUseCase:
    """Tests for the thread view."""

    @pytest.mark.asyncio
    async def test_full_tree_with_authors(self, unit_env):
        """Every node in the nested tree carries its author."""
        # Arrange
        use_case = await unit_env.get(GetThreadUseCase)
        user_repo = await unit_env.get(UserRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        community_repo = await unit_env.get(CommunityRepository)
        ada, bob = make_user("ada"), make_user("bob", minutes=1)
        await user_repo.save(ada)
        await user_repo.save(bob)
        community = make_community(ada.id)
        await community_repo.save(community)
        root = make_thread(ada.id, text="Root post", community_id=community.id)
        reply = make_thread(bob.id, text="Bob replies", parent_id=root.id, minutes=1)
        nested = make_thread(ada.id, text="Ada answers", parent_id=reply.id, minutes=2)
        for thread in (root, reply, nested):
            await thread_repo.save(thread)

        # Act
        response = await use_case.execute(GetThreadRequest(thread_id=str(root.id)))

        # Assert
        assert response.community.handle == "python"
        tree = response.thread
        assert tree.author.username == "ada"
        assert [r.thread_id for r in tree.replies] == [str(reply.id)]
        assert tree.replies[0].author.username == "bob"
        assert tree.replies[0].replies[0].text == "Ada answers"
        assert tree.replies[0].replies[0].parent_id == str(reply.id)

    @pytest.mark.asyncio
    async def test_depth_limit_from_settings(self, unit_env):
        """Replies deeper than max_reply_depth are not returned."""
        # Arrange
        thread_repo = await unit_env.get(ThreadRepository)
        use_case = GetThreadUseCase(
            thread_service=await unit_env.get(ThreadService),
            user_service=await unit_env.get(UserService),
            community_service=await unit_env.get(CommunityService),
            thread_settings=ThreadSettings(max_reply_depth=1),
        )
        author_id = make_user("ada").id
        root = make_thread(author_id, text="Root post")
        reply = make_thread(author_id, text="Level one", parent_id=root.id, minutes=1)
        deep = make_thread(author_id, text="Level two", parent_id=reply.id, minutes=2)
        for thread in (root, reply, deep):
            await thread_repo.save(thread)

        # Act
        response = await use_case.execute(GetThreadRequest(thread_id=str(root.id)))

        # Assert
        assert len(response.thread.replies) == 1
        assert response.thread.replies[0].replies == []
        assert response.thread.author is None

    @pytest.mark.asyncio
    async def test_missing_thread(self, unit_env):
        use_case = await unit_env.get(GetThreadUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetThreadRequest(thread_id=str(uuid4())))


class TestReplyToThreadUseCase:
    """Tests for adding comments."""

    @pytest.mark.asyncio
    async def test_reply_becomes_child_of_parent(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ReplyToThreadUseCase)
        user_repo = await unit_env.get(UserRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        ada = make_user("ada")
        await user_repo.save(ada)
        post = make_thread(ada.id, text="Root post")
        await thread_repo.save(post)

        # Act
        response = await use_case.execute(
            ReplyToThreadRequest(
                thread_id=str(post.id), text="First comment", author_id=str(ada.id)
            )
        )

        # Assert
        assert response.parent_id == str(post.id)
        parent = await thread_repo.find_by_id(post.id)
        assert [str(c) for c in parent.child_ids] == [response.thread_id]
        # Replies don't count as the author's threads
        assert (await user_repo.find_by_id(ada.id)).thread_ids == [post.id]

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent(self, unit_env):
        use_case = await unit_env.get(ReplyToThreadUseCase)
        user_repo = await unit_env.get(UserRepository)
        ada = make_user("ada")
        await user_repo.save(ada)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ReplyToThreadRequest(
                    thread_id=str(uuid4()), text="Into the void", author_id=str(ada.id)
                )
            )
