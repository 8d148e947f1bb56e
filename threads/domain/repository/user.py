"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from threads.domain.model.user import User
from threads.domain.value import ExternalId, SortOrder, UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_external_id(self, external_id: ExternalId) -> Optional[User]:
        """Find a user by their identity provider id.

        Args:
            external_id: The identity provider's user id

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: The username (already lowercase)

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find several users in one query.

        Unknown ids are skipped; order of the result is unspecified.

        Args:
            user_ids: User IDs to load

        Returns:
            The users that exist
        """
        pass

    @abstractmethod
    async def search(
        self,
        exclude_id: UserId | None = None,
        query: str | None = None,
        sort: SortOrder = SortOrder.DESC,
        limit: int = 20,
        offset: int = 0,
    ) -> list[User]:
        """Search users by username or name.

        Matching is a case-insensitive substring match on either field.

        Args:
            exclude_id: User to leave out (usually the caller)
            query: Search text; None matches every user
            sort: Creation-time order
            limit: Maximum number of users to return
            offset: Number of users to skip

        Returns:
            Matching users
        """
        pass

    @abstractmethod
    async def count_search(
        self, exclude_id: UserId | None = None, query: str | None = None
    ) -> int:
        """Count users matching a search.

        Args:
            exclude_id: User to leave out
            query: Search text; None matches every user

        Returns:
            Number of matching users
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Derived fields (thread_ids, community_ids) are ignored.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
