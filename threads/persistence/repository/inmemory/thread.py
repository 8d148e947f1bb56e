"""In-memory thread repository for testing."""

from typing import Optional

from threads.domain.model.thread import Thread
from threads.domain.repository.thread import ThreadRepository
from threads.domain.value import CommunityId, ThreadId, UserId

from .store import InMemoryStore, by_created_at


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    def _with_children(self, thread: Thread) -> Thread:
        children = [
            t for t in self._store.threads.values() if t.parent_id == thread.id
        ]
        return thread.model_copy(
            update={
                "child_ids": [
                    t.id for t in by_created_at(children, newest_first=False)
                ]
            }
        )

    def _sorted(self, threads: list[Thread], newest_first: bool) -> list[Thread]:
        return [
            self._with_children(t) for t in by_created_at(threads, newest_first)
        ]

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        thread = self._store.threads.get(thread_id)
        return self._with_children(thread) if thread else None

    async def find_top_level(self, limit: int = 20, offset: int = 0) -> list[Thread]:
        """Find top-level threads, newest first."""
        threads = [t for t in self._store.threads.values() if t.parent_id is None]
        return self._sorted(threads, newest_first=True)[offset : offset + limit]

    async def count_top_level(self) -> int:
        """Count top-level threads."""
        return sum(1 for t in self._store.threads.values() if t.parent_id is None)

    async def find_children(self, parent_ids: list[ThreadId]) -> list[Thread]:
        """Find direct replies of any of the given threads, oldest first."""
        parents = set(parent_ids)
        threads = [t for t in self._store.threads.values() if t.parent_id in parents]
        return self._sorted(threads, newest_first=False)

    async def find_by_author(
        self, author_id: UserId, top_level_only: bool = True
    ) -> list[Thread]:
        """Find threads written by a user, newest first."""
        threads = [
            t
            for t in self._store.threads.values()
            if t.author_id == author_id and (not top_level_only or t.parent_id is None)
        ]
        return self._sorted(threads, newest_first=True)

    async def find_by_community(self, community_id: CommunityId) -> list[Thread]:
        """Find threads posted to a community, newest first."""
        threads = [
            t for t in self._store.threads.values() if t.community_id == community_id
        ]
        return self._sorted(threads, newest_first=True)

    async def find_replies_to_author(self, author_id: UserId) -> list[Thread]:
        """Find replies by other users to the user's threads, newest first."""
        own_ids = {
            t.id for t in self._store.threads.values() if t.author_id == author_id
        }
        threads = [
            t
            for t in self._store.threads.values()
            if t.parent_id in own_ids and t.author_id != author_id
        ]
        return self._sorted(threads, newest_first=True)

    async def save(self, thread: Thread) -> Thread:
        """Save or update a thread."""
        self._store.threads[thread.id] = thread.model_copy(update={"child_ids": []})
        return thread

    async def delete_many(self, thread_ids: list[ThreadId]) -> int:
        """Delete threads and their replies."""
        return self._store.remove_threads(thread_ids)
