"""Unit tests for DeleteThreadUseCase."""

from uuid import uuid4

import pytest

from tests.conftest import make_thread
from tests.harness import create_env_fixture
from threads.application.usecase.thread import DeleteThreadRequest, DeleteThreadUseCase
from threads.domain.error import NotAuthorizedError
from threads.domain.repository import ThreadRepository
from threads.domain.value import UserId

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_author_deletes_subtree(unit_env):
    use_case = await unit_env.get(DeleteThreadUseCase)
    thread_repo = await unit_env.get(ThreadRepository)
    author_id = UserId(uuid4())
    post = make_thread(author_id)
    reply = make_thread(UserId(uuid4()), parent_id=post.id, minutes=1)
    await thread_repo.save(post)
    await thread_repo.save(reply)

    response = await use_case.execute(
        DeleteThreadRequest(thread_id=str(post.id), requester_id=str(author_id))
    )

    assert response.deleted_count == 2
    assert await thread_repo.count_top_level() == 0


@pytest.mark.asyncio
async def test_reply_author_cannot_delete_parent(unit_env):
    use_case = await unit_env.get(DeleteThreadUseCase)
    thread_repo = await unit_env.get(ThreadRepository)
    replier_id = UserId(uuid4())
    post = make_thread(UserId(uuid4()))
    await thread_repo.save(post)
    await thread_repo.save(make_thread(replier_id, parent_id=post.id, minutes=1))

    with pytest.raises(NotAuthorizedError):
        await use_case.execute(
            DeleteThreadRequest(thread_id=str(post.id), requester_id=str(replier_id))
        )
