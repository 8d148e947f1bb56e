"""In-memory community repository for testing."""

from typing import Optional

from threads.domain.model.community import Community
from threads.domain.repository.community import CommunityRepository
from threads.domain.value import CommunityId, SortOrder, UserId, Username

from .store import InMemoryStore, by_created_at, matches


class InMemoryCommunityRepository(CommunityRepository):
    """In-memory implementation of CommunityRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    def _with_derived(self, community: Community) -> Community:
        threads = [
            t
            for t in self._store.threads.values()
            if t.community_id == community.id
        ]
        return community.model_copy(
            update={
                "member_ids": [
                    user_id
                    for community_id, user_id in self._store.memberships
                    if community_id == community.id
                ],
                "thread_ids": [
                    t.id for t in by_created_at(threads, newest_first=True)
                ],
            }
        )

    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID."""
        community = self._store.communities.get(community_id)
        return self._with_derived(community) if community else None

    async def find_by_handle(self, handle: Username) -> Optional[Community]:
        """Find a community by handle."""
        for community in self._store.communities.values():
            if community.handle == handle:
                return self._with_derived(community)
        return None

    async def find_by_ids(self, community_ids: list[CommunityId]) -> list[Community]:
        """Find several communities."""
        return [
            self._with_derived(self._store.communities[community_id])
            for community_id in dict.fromkeys(community_ids)
            if community_id in self._store.communities
        ]

    def _matching(self, query: str | None) -> list[Community]:
        return [
            c
            for c in self._store.communities.values()
            if matches(query, c.handle.root, c.name)
        ]

    async def search(
        self,
        query: str | None = None,
        sort: SortOrder = SortOrder.DESC,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Community]:
        """Search communities by handle or name."""
        communities = by_created_at(
            self._matching(query), newest_first=sort == SortOrder.DESC
        )
        return [self._with_derived(c) for c in communities[offset : offset + limit]]

    async def count_search(self, query: str | None = None) -> int:
        """Count communities matching a search."""
        return len(self._matching(query))

    async def save(self, community: Community) -> Community:
        """Save or update a community."""
        self._store.communities[community.id] = community.model_copy(
            update={"member_ids": [], "thread_ids": []}
        )
        return community

    async def delete(self, community_id: CommunityId) -> None:
        """Delete a community, its memberships and its threads."""
        self._store.communities.pop(community_id, None)
        self._store.memberships = [
            (cid, uid) for cid, uid in self._store.memberships if cid != community_id
        ]
        self._store.remove_threads(
            [t.id for t in self._store.threads.values() if t.community_id == community_id]
        )

    async def add_member(self, community_id: CommunityId, user_id: UserId) -> None:
        """Add a user to a community's members."""
        if (community_id, user_id) not in self._store.memberships:
            self._store.memberships.append((community_id, user_id))

    async def remove_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Remove a user from a community's members."""
        if (community_id, user_id) not in self._store.memberships:
            return False
        self._store.memberships.remove((community_id, user_id))
        return True
