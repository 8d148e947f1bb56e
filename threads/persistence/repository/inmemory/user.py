"""In-memory user repository for testing."""

from typing import Optional

from threads.domain.model.user import User
from threads.domain.repository.user import UserRepository
from threads.domain.value import ExternalId, SortOrder, UserId, Username

from .store import InMemoryStore, by_created_at, matches


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    def _with_derived(self, user: User) -> User:
        threads = [
            t
            for t in self._store.threads.values()
            if t.author_id == user.id and t.parent_id is None
        ]
        return user.model_copy(
            update={
                "thread_ids": [t.id for t in by_created_at(threads, newest_first=True)],
                "community_ids": [
                    community_id
                    for community_id, user_id in self._store.memberships
                    if user_id == user.id
                ],
            }
        )

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        user = self._store.users.get(user_id)
        return self._with_derived(user) if user else None

    async def find_by_external_id(self, external_id: ExternalId) -> Optional[User]:
        """Find a user by their identity provider id."""
        for user in self._store.users.values():
            if user.external_id == external_id:
                return self._with_derived(user)
        return None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._store.users.values():
            if user.username == username:
                return self._with_derived(user)
        return None

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find several users."""
        return [
            self._with_derived(self._store.users[user_id])
            for user_id in dict.fromkeys(user_ids)
            if user_id in self._store.users
        ]

    def _matching(self, exclude_id: UserId | None, query: str | None) -> list[User]:
        return [
            user
            for user in self._store.users.values()
            if user.id != exclude_id and matches(query, user.username.root, user.name)
        ]

    async def search(
        self,
        exclude_id: UserId | None = None,
        query: str | None = None,
        sort: SortOrder = SortOrder.DESC,
        limit: int = 20,
        offset: int = 0,
    ) -> list[User]:
        """Search users by username or name."""
        users = by_created_at(
            self._matching(exclude_id, query), newest_first=sort == SortOrder.DESC
        )
        return [self._with_derived(u) for u in users[offset : offset + limit]]

    async def count_search(
        self, exclude_id: UserId | None = None, query: str | None = None
    ) -> int:
        """Count users matching a search."""
        return len(self._matching(exclude_id, query))

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._store.users[user.id] = user.model_copy(
            update={"thread_ids": [], "community_ids": []}
        )
        return user
