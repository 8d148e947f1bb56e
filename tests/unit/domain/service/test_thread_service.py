"""Unit tests for ThreadService."""

from uuid import uuid4

import pytest

from tests.conftest import make_thread, make_user
from tests.harness import create_env_fixture
from threads.domain.error import NotAuthorizedError, NotFoundError
from threads.domain.repository import ThreadRepository, UserRepository
from threads.domain.service import ThreadService
from threads.domain.value import CommunityId, Page, ThreadId, UserId

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCreateThread:
    """Tests for create_thread method."""

    @pytest.mark.asyncio
    async def test_create_top_level_thread(self, unit_env):
        """Top-level thread has no parent and keeps its community."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author_id = UserId(uuid4())
        community_id = CommunityId(uuid4())

        # Act
        result = await thread_service.create_thread(
            text="First thread", author_id=author_id, community_id=community_id
        )

        # Assert
        assert result.parent_id is None
        assert result.community_id == community_id
        assert result.is_top_level
        saved = await thread_repo.find_by_id(result.id)
        assert saved is not None
        assert saved.text == "First thread"

    @pytest.mark.asyncio
    async def test_create_reply_links_to_parent(self, unit_env):
        """Reply points at its parent and shows up in the parent's children."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author_id = UserId(uuid4())
        parent = await thread_service.create_thread(
            text="Parent thread", author_id=author_id
        )

        # Act
        reply = await thread_service.create_thread(
            text="A reply", author_id=author_id, parent_id=parent.id
        )

        # Assert
        assert reply.parent_id == parent.id
        assert reply.community_id is None
        reloaded = await thread_repo.find_by_id(parent.id)
        assert reloaded.child_ids == [reply.id]

    @pytest.mark.asyncio
    async def test_create_reply_to_missing_parent_raises(self, unit_env):
        """Replying to a thread that doesn't exist is a not-found error."""
        thread_service = await unit_env.get(ThreadService)

        with pytest.raises(NotFoundError):
            await thread_service.create_thread(
                text="Orphan reply",
                author_id=UserId(uuid4()),
                parent_id=ThreadId(uuid4()),
            )


class TestListTopLevel:
    """Tests for list_top_level method."""

    @pytest.mark.asyncio
    async def test_feed_is_newest_first_and_excludes_replies(self, unit_env):
        """Replies never appear in the feed; posts are newest first."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author_id = UserId(uuid4())
        old = make_thread(author_id, text="Older post", minutes=0)
        new = make_thread(author_id, text="Newer post", minutes=10)
        reply = make_thread(author_id, text="Reply", parent_id=old.id, minutes=20)
        for thread in (old, new, reply):
            await thread_repo.save(thread)

        # Act
        threads, is_next = await thread_service.list_top_level(Page(number=1, size=20))

        # Assert
        assert [t.id for t in threads] == [new.id, old.id]
        assert is_next is False

    @pytest.mark.asyncio
    async def test_is_next_only_when_more_remain(self, unit_env):
        """is_next is true exactly when top-level threads remain."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author_id = UserId(uuid4())
        for minute in range(5):
            await thread_repo.save(make_thread(author_id, minutes=minute))

        # Act
        first, first_next = await thread_service.list_top_level(Page(number=1, size=2))
        last, last_next = await thread_service.list_top_level(Page(number=3, size=2))
        exact, exact_next = await thread_service.list_top_level(Page(number=1, size=5))

        # Assert
        assert len(first) == 2 and first_next is True
        assert len(last) == 1 and last_next is False
        assert len(exact) == 5 and exact_next is False


class TestBuildReplyTree:
    """Tests for build_reply_tree method."""

    @pytest.mark.asyncio
    async def test_every_reply_appears_under_its_parent(self, unit_env):
        """Nested replies are attached to their parents, oldest first."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author_id = UserId(uuid4())
        root = make_thread(author_id, text="Root post")
        first = make_thread(author_id, text="First reply", parent_id=root.id, minutes=1)
        second = make_thread(
            author_id, text="Second reply", parent_id=root.id, minutes=2
        )
        nested = make_thread(
            author_id, text="Nested reply", parent_id=first.id, minutes=3
        )
        for thread in (root, second, first, nested):
            await thread_repo.save(thread)

        # Act
        tree = await thread_service.build_reply_tree(root, max_depth=50)

        # Assert
        assert [child.thread.id for child in tree.children] == [first.id, second.id]
        assert [n.thread.id for n in tree.children[0].children] == [nested.id]
        assert tree.children[1].children == []
        assert {t.id for t in tree.walk()} == {root.id, first.id, second.id, nested.id}

    @pytest.mark.asyncio
    async def test_depth_limit_truncates_tree(self, unit_env):
        """Replies below max_depth levels are left out."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author_id = UserId(uuid4())
        root = make_thread(author_id, text="Root post")
        await thread_repo.save(root)
        parent = root
        for level in range(1, 5):
            child = make_thread(
                author_id, text=f"Level {level}", parent_id=parent.id, minutes=level
            )
            await thread_repo.save(child)
            parent = child

        # Act
        tree = await thread_service.build_reply_tree(root, max_depth=2)

        # Assert
        assert len(list(tree.walk())) == 3
        assert tree.children[0].children[0].children == []
        assert tree.truncated is True

    @pytest.mark.asyncio
    async def test_limit_on_leaves_is_not_truncation(self, unit_env):
        """A tree exactly max_depth levels deep is complete."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author_id = UserId(uuid4())
        root = make_thread(author_id, text="Root post")
        reply = make_thread(author_id, text="Only reply", parent_id=root.id, minutes=1)
        for thread in (root, reply):
            await thread_repo.save(thread)

        # Act
        tree = await thread_service.build_reply_tree(root, max_depth=1)

        # Assert
        assert [n.thread.id for n in tree.children] == [reply.id]
        assert tree.truncated is False

    @pytest.mark.asyncio
    async def test_cycle_in_stored_data_terminates(self, unit_env):
        """Parent links forming a loop don't make the walk run forever."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author_id = UserId(uuid4())
        root_id = ThreadId(uuid4())
        loop = make_thread(author_id, text="Loop reply", parent_id=root_id)
        root = make_thread(author_id, text="Root post", parent_id=loop.id)
        root = root.model_copy(update={"id": root_id})
        await thread_repo.save(root)
        await thread_repo.save(loop)

        # Act
        tree = await thread_service.build_reply_tree(root, max_depth=50)

        # Assert
        assert [t.id for t in tree.walk()] == [root_id, loop.id]

    @pytest.mark.asyncio
    async def test_thread_without_replies(self, unit_env):
        """A thread with no replies is a single node."""
        thread_service = await unit_env.get(ThreadService)
        root = await thread_service.create_thread(
            text="Lonely post", author_id=UserId(uuid4())
        )

        tree = await thread_service.build_reply_tree(root, max_depth=50)

        assert tree.thread.id == root.id
        assert tree.children == []


class TestDeleteThread:
    """Tests for delete_thread method."""

    @pytest.mark.asyncio
    async def test_delete_removes_whole_subtree_and_nothing_else(self, unit_env):
        """Deleting a thread removes its descendants but not other threads."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author_id = UserId(uuid4())
        root = await thread_service.create_thread(text="Root post", author_id=author_id)
        reply = await thread_service.create_thread(
            text="Reply one", author_id=UserId(uuid4()), parent_id=root.id
        )
        nested = await thread_service.create_thread(
            text="Reply two", author_id=author_id, parent_id=reply.id
        )
        other = await thread_service.create_thread(
            text="Unrelated post", author_id=author_id
        )

        # Act
        deleted = await thread_service.delete_thread(root.id, requester_id=author_id)

        # Assert
        assert deleted == 3
        for thread_id in (root.id, reply.id, nested.id):
            assert await thread_repo.find_by_id(thread_id) is None
        assert await thread_repo.find_by_id(other.id) is not None

    @pytest.mark.asyncio
    async def test_only_author_can_delete(self, unit_env):
        """Other users get NotAuthorizedError and the thread stays."""
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        root = await thread_service.create_thread(
            text="Root post", author_id=UserId(uuid4())
        )

        with pytest.raises(NotAuthorizedError):
            await thread_service.delete_thread(root.id, requester_id=UserId(uuid4()))

        assert await thread_repo.find_by_id(root.id) is not None

    @pytest.mark.asyncio
    async def test_delete_missing_thread_raises(self, unit_env):
        """Deleting an unknown thread is a not-found error."""
        thread_service = await unit_env.get(ThreadService)

        with pytest.raises(NotFoundError):
            await thread_service.delete_thread(
                ThreadId(uuid4()), requester_id=UserId(uuid4())
            )


class TestRepliesToAuthor:
    """Tests for list_replies_to_author method."""

    @pytest.mark.asyncio
    async def test_activity_excludes_own_replies(self, unit_env):
        """Only other users' replies to the user's threads are returned."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        user_repo = await unit_env.get(UserRepository)
        ada = make_user("ada")
        bob = make_user("bob", minutes=1)
        await user_repo.save(ada)
        await user_repo.save(bob)
        post = await thread_service.create_thread(text="Ada's post", author_id=ada.id)
        await thread_service.create_thread(
            text="Ada replies to herself", author_id=ada.id, parent_id=post.id
        )
        bob_reply = await thread_service.create_thread(
            text="Bob replies", author_id=bob.id, parent_id=post.id
        )
        bob_post = await thread_service.create_thread(
            text="Bob's post", author_id=bob.id
        )
        await thread_service.create_thread(
            text="Ada replies to Bob", author_id=ada.id, parent_id=bob_post.id
        )

        # Act
        activity = await thread_service.list_replies_to_author(ada.id)

        # Assert
        assert [t.id for t in activity] == [bob_reply.id]
