"""Community repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from threads.domain.model.community import Community
from threads.domain.value import CommunityId, SortOrder, UserId, Username


class CommunityRepository(ABC):
    """Repository for Community aggregate.

    Membership is stored by this repository as well.
    Returned communities have ``member_ids`` and ``thread_ids`` populated.
    """

    @abstractmethod
    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID.

        Args:
            community_id: The community's unique identifier

        Returns:
            The community if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_handle(self, handle: Username) -> Optional[Community]:
        """Find a community by handle.

        Args:
            handle: The community handle (already lowercase)

        Returns:
            The community if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, community_ids: list[CommunityId]) -> list[Community]:
        """Find several communities in one query.

        Args:
            community_ids: Community IDs to load

        Returns:
            The communities that exist
        """
        pass

    @abstractmethod
    async def search(
        self,
        query: str | None = None,
        sort: SortOrder = SortOrder.DESC,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Community]:
        """Search communities by handle or name (case-insensitive substring).

        Args:
            query: Search text; None matches every community
            sort: Creation-time order
            limit: Maximum number of communities to return
            offset: Number of communities to skip

        Returns:
            Matching communities
        """
        pass

    @abstractmethod
    async def count_search(self, query: str | None = None) -> int:
        """Count communities matching a search."""
        pass

    @abstractmethod
    async def save(self, community: Community) -> Community:
        """Save a community (create or update).

        Derived fields (member_ids, thread_ids) are ignored.
        """
        pass

    @abstractmethod
    async def delete(self, community_id: CommunityId) -> None:
        """Delete a community and its memberships."""
        pass

    @abstractmethod
    async def add_member(self, community_id: CommunityId, user_id: UserId) -> None:
        """Add a user to a community's members."""
        pass

    @abstractmethod
    async def remove_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Remove a user from a community's members.

        Returns:
            True if the user was a member
        """
        pass
