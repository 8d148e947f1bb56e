"""Unit tests for SearchUsersUseCase and GetActivityUseCase."""

import pytest

from tests.conftest import make_thread, make_user
from tests.harness import create_env_fixture
from threads.application.usecase.user import (
    GetActivityRequest,
    GetActivityUseCase,
    SearchUsersRequest,
    SearchUsersUseCase,
)
from threads.domain.repository import ThreadRepository, UserRepository
from threads.domain.value import SortOrder

unit_env = create_env_fixture()


class TestSearchUsersUseCase:
    """Tests for user search."""

    @pytest.mark.asyncio
    async def test_search_excludes_current_user_and_paginates(self, unit_env):
        # Arrange
        use_case = await unit_env.get(SearchUsersUseCase)
        user_repo = await unit_env.get(UserRepository)
        me = make_user("ada", name="Ada")
        others = [make_user(f"user{i}", name=f"User {i}", minutes=i + 1) for i in range(3)]
        for user in [me, *others]:
            await user_repo.save(user)

        # Act
        page_one = await use_case.execute(
            SearchUsersRequest(current_user_id=str(me.id), page_size=2)
        )
        page_two = await use_case.execute(
            SearchUsersRequest(current_user_id=str(me.id), page_number=2, page_size=2)
        )

        # Assert
        assert [u.username for u in page_one.users] == ["user2", "user1"]
        assert page_one.is_next is True
        assert [u.username for u in page_two.users] == ["user0"]
        assert page_two.is_next is False

    @pytest.mark.asyncio
    async def test_search_string_and_ascending_sort(self, unit_env):
        use_case = await unit_env.get(SearchUsersUseCase)
        user_repo = await unit_env.get(UserRepository)
        me = make_user("ada")
        grace = make_user("grace", name="Grace Hopper", minutes=1)
        gracie = make_user("gracie", name="Gracie", minutes=2)
        alan = make_user("alan", name="Alan Turing", minutes=3)
        for user in (me, grace, gracie, alan):
            await user_repo.save(user)

        response = await use_case.execute(
            SearchUsersRequest(
                current_user_id=str(me.id),
                search_string="GRAC",
                sort_by=SortOrder.ASC,
            )
        )

        assert [u.username for u in response.users] == ["grace", "gracie"]


class TestGetActivityUseCase:
    """Tests for the activity feed."""

    @pytest.mark.asyncio
    async def test_replies_by_others_newest_first(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetActivityUseCase)
        user_repo = await unit_env.get(UserRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        ada, bob, cy = make_user("ada"), make_user("bob"), make_user("cyd")
        for user in (ada, bob, cy):
            await user_repo.save(user)
        post = make_thread(ada.id, text="Ada's post")
        bob_reply = make_thread(bob.id, text="Bob says hi", parent_id=post.id, minutes=1)
        own = make_thread(ada.id, text="Ada says hi", parent_id=post.id, minutes=2)
        cy_reply = make_thread(cy.id, text="Cyd says hi", parent_id=own.id, minutes=3)
        for thread in (post, bob_reply, own, cy_reply):
            await thread_repo.save(thread)

        # Act
        response = await use_case.execute(GetActivityRequest(user_id=str(ada.id)))

        # Assert
        assert [a.thread_id for a in response.activity] == [
            str(cy_reply.id),
            str(bob_reply.id),
        ]
        assert response.activity[0].author.username == "cyd"
        assert response.activity[0].parent_id == str(own.id)

    @pytest.mark.asyncio
    async def test_no_activity(self, unit_env):
        use_case = await unit_env.get(GetActivityUseCase)
        user_repo = await unit_env.get(UserRepository)
        ada = make_user("ada")
        await user_repo.save(ada)

        response = await use_case.execute(GetActivityRequest(user_id=str(ada.id)))

        assert response.activity == []
