"""Shared state for the in-memory repositories.

The repositories derive list fields (a user's threads, a thread's replies,
a community's members) from each other's data, so they read and write one
store instead of holding separate dicts.
"""

from typing import Iterable, TypeVar

from threads.domain.model import Community, Thread, User
from threads.domain.value import CommunityId, ThreadId, UserId

T = TypeVar("T", User, Thread, Community)


class InMemoryStore:
    """Tables for users, threads, communities and memberships."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.threads: dict[ThreadId, Thread] = {}
        self.communities: dict[CommunityId, Community] = {}
        # (community_id, user_id) in join order
        self.memberships: list[tuple[CommunityId, UserId]] = []

    def remove_threads(self, thread_ids: Iterable[ThreadId]) -> int:
        """Remove threads and, like the database cascade, all their replies.

        Returns:
            Number of threads removed
        """
        pending = [tid for tid in thread_ids if tid in self.threads]
        removed = 0
        while pending:
            thread_id = pending.pop()
            if self.threads.pop(thread_id, None) is None:
                continue
            removed += 1
            pending.extend(
                t.id for t in self.threads.values() if t.parent_id == thread_id
            )
        return removed


def by_created_at(items: Iterable[T], newest_first: bool) -> list[T]:
    """Sort entities by creation time, breaking ties by insertion order."""
    indexed = list(enumerate(items))
    indexed.sort(key=lambda pair: (pair[1].created_at, pair[0]), reverse=newest_first)
    return [item for _, item in indexed]


def matches(query: str | None, *values: str) -> bool:
    """Case-insensitive substring match against any of the values."""
    if not query:
        return True
    needle = query.lower()
    return any(needle in value.lower() for value in values)
