"""Thread repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from threads.domain.model.thread import Thread
from threads.domain.value import CommunityId, ThreadId, UserId


class ThreadRepository(ABC):
    """Repository for Thread entity.

    Defines the contract for thread persistence operations.
    Every returned thread has ``child_ids`` populated, oldest reply first.
    """

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID.

        Args:
            thread_id: The thread's unique identifier

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(self, limit: int = 20, offset: int = 0) -> list[Thread]:
        """Find top-level threads (no parent), newest first.

        Args:
            limit: Maximum number of threads to return
            offset: Number of threads to skip

        Returns:
            Page of top-level threads
        """
        pass

    @abstractmethod
    async def count_top_level(self) -> int:
        """Count top-level threads.

        Returns:
            Number of threads without a parent
        """
        pass

    @abstractmethod
    async def find_children(self, parent_ids: list[ThreadId]) -> list[Thread]:
        """Find direct replies of any of the given threads.

        One query per call regardless of how many parents are given.

        Args:
            parent_ids: Parent thread IDs

        Returns:
            Replies, oldest first
        """
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, top_level_only: bool = True
    ) -> list[Thread]:
        """Find threads written by a user, newest first.

        Args:
            author_id: The author's user ID
            top_level_only: Leave out the user's replies

        Returns:
            Threads by the author
        """
        pass

    @abstractmethod
    async def find_by_community(self, community_id: CommunityId) -> list[Thread]:
        """Find threads posted to a community, newest first.

        Args:
            community_id: The community ID

        Returns:
            Threads in the community
        """
        pass

    @abstractmethod
    async def find_replies_to_author(self, author_id: UserId) -> list[Thread]:
        """Find replies written by other users to a user's threads.

        Args:
            author_id: The user whose threads were replied to

        Returns:
            Replies by anyone but the author, newest first
        """
        pass

    @abstractmethod
    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update).

        ``child_ids`` is ignored; it is derived from the replies' parent_id.

        Args:
            thread: The thread to save

        Returns:
            The saved thread
        """
        pass

    @abstractmethod
    async def delete_many(self, thread_ids: list[ThreadId]) -> int:
        """Delete threads (hard delete).

        Args:
            thread_ids: Thread IDs to delete

        Returns:
            Number of threads deleted
        """
        pass
