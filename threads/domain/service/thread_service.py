"""Thread domain service."""

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire

from threads.domain.error import NotAuthorizedError, NotFoundError
from threads.domain.model import Thread
from threads.domain.repository import ThreadRepository
from threads.domain.value import CommunityId, Page, ThreadId, UserId

from .base import Service


@dataclass
class ThreadNode:
    """Node in a reply tree.

    Holds a thread and its direct replies, each a node itself. ``truncated``
    is set on the root when deeper replies exist below the depth limit.
    """

    thread: Thread
    children: list["ThreadNode"]
    truncated: bool = False

    def walk(self):
        """Yield every thread in the subtree, parents before children."""
        yield self.thread
        for child in self.children:
            yield from child.walk()


class ThreadService(Service):
    """Domain service for thread operations."""

    def __init__(self, thread_repository: ThreadRepository) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
        """
        self.thread_repository = thread_repository

    async def create_thread(
        self,
        text: str,
        author_id: UserId,
        community_id: CommunityId | None = None,
        parent_id: ThreadId | None = None,
    ) -> Thread:
        """Create a top-level thread or a reply.

        Args:
            text: Thread text
            author_id: Author user ID
            community_id: Community to post to (top-level threads only)
            parent_id: Parent thread ID for replies (None for top-level)

        Returns:
            Created thread

        Raises:
            NotFoundError: If the parent thread doesn't exist
        """
        with logfire.span(
            "thread_service.create_thread",
            author_id=str(author_id),
            community_id=str(community_id) if community_id else None,
            parent_id=str(parent_id) if parent_id else None,
        ):
            if parent_id:
                parent = await self.thread_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error("Parent thread not found", parent_id=str(parent_id))
                    raise NotFoundError("Thread", str(parent_id))

            thread = Thread(
                id=ThreadId(uuid4()),
                text=text,
                author_id=author_id,
                community_id=community_id if parent_id is None else None,
                parent_id=parent_id,
                created_at=datetime.now(),
            )

            saved = await self.thread_repository.save(thread)
            logfire.info(
                "Thread created",
                thread_id=str(saved.id),
                is_reply=parent_id is not None,
            )
            return saved

    async def get_by_id(self, thread_id: ThreadId) -> Thread:
        """Get thread by ID.

        Raises:
            NotFoundError: If thread not found
        """
        with logfire.span("thread_service.get_by_id", thread_id=str(thread_id)):
            thread = await self.thread_repository.find_by_id(thread_id)
            if not thread:
                logfire.warn("Thread not found", thread_id=str(thread_id))
                raise NotFoundError("Thread", str(thread_id))
            return thread

    async def list_top_level(self, page: Page) -> tuple[list[Thread], bool]:
        """List the feed of top-level threads, newest first.

        Args:
            page: Page to return

        Returns:
            Threads on the page and whether a next page exists
        """
        with logfire.span(
            "thread_service.list_top_level", page=page.number, size=page.size
        ):
            threads = await self.thread_repository.find_top_level(
                limit=page.size, offset=page.skip
            )
            total = await self.thread_repository.count_top_level()
            is_next = page.has_next(total, len(threads))
            logfire.info("Threads listed", count=len(threads), total=total)
            return threads, is_next

    async def get_children(
        self, parent_ids: list[ThreadId]
    ) -> dict[ThreadId, list[Thread]]:
        """Get the direct replies of several threads at once.

        Args:
            parent_ids: Parent thread IDs

        Returns:
            Mapping of parent ID to its replies (oldest first); every
            requested parent has an entry
        """
        children: dict[ThreadId, list[Thread]] = {pid: [] for pid in parent_ids}
        if not parent_ids:
            return children
        for child in await self.thread_repository.find_children(parent_ids):
            if child.parent_id in children:
                children[child.parent_id].append(child)
        return children

    async def build_reply_tree(self, root: Thread, max_depth: int) -> ThreadNode:
        """Build the nested reply tree under a thread.

        Walks one level at a time so every level costs a single query.
        Threads already seen are skipped, which keeps the walk finite even
        if stored parent links form a cycle.

        Args:
            root: Thread at the top of the tree
            max_depth: Number of reply levels to load below the root

        Returns:
            Root node with replies populated recursively, oldest first
        """
        with logfire.span(
            "thread_service.build_reply_tree",
            thread_id=str(root.id),
            max_depth=max_depth,
        ):
            root_node = ThreadNode(thread=root, children=[])
            nodes: dict[ThreadId, ThreadNode] = {root.id: root_node}
            frontier = [root.id]
            depth = 0

            while frontier and depth < max_depth:
                next_frontier: list[ThreadId] = []
                for child in await self.thread_repository.find_children(frontier):
                    if child.id in nodes:
                        logfire.warn(
                            "Reply cycle detected", thread_id=str(child.id)
                        )
                        continue
                    parent_node = nodes.get(child.parent_id)
                    if parent_node is None:
                        continue
                    node = ThreadNode(thread=child, children=[])
                    parent_node.children.append(node)
                    nodes[child.id] = node
                    next_frontier.append(child.id)
                frontier = next_frontier
                depth += 1

            if frontier and await self.thread_repository.find_children(frontier):
                root_node.truncated = True
                logfire.info(
                    "Reply tree truncated at max depth",
                    thread_id=str(root.id),
                    max_depth=max_depth,
                )

            logfire.info(
                "Reply tree built", thread_id=str(root.id), size=len(nodes), depth=depth
            )
            return root_node

    async def collect_subtree_ids(self, root_id: ThreadId) -> list[ThreadId]:
        """Collect a thread's ID and the IDs of all its descendants.

        Args:
            root_id: Thread at the top of the subtree

        Returns:
            IDs in breadth-first order, root first
        """
        collected: list[ThreadId] = [root_id]
        seen = {root_id}
        frontier = [root_id]
        while frontier:
            next_frontier: list[ThreadId] = []
            for child in await self.thread_repository.find_children(frontier):
                if child.id in seen:
                    continue
                seen.add(child.id)
                collected.append(child.id)
                next_frontier.append(child.id)
            frontier = next_frontier
        return collected

    async def list_by_author(self, author_id: UserId) -> list[Thread]:
        """List a user's top-level threads, newest first."""
        with logfire.span("thread_service.list_by_author", author_id=str(author_id)):
            return await self.thread_repository.find_by_author(
                author_id, top_level_only=True
            )

    async def list_by_community(self, community_id: CommunityId) -> list[Thread]:
        """List a community's threads, newest first."""
        with logfire.span(
            "thread_service.list_by_community", community_id=str(community_id)
        ):
            return await self.thread_repository.find_by_community(community_id)

    async def list_replies_to_author(self, author_id: UserId) -> list[Thread]:
        """List replies other users wrote to a user's threads, newest first."""
        with logfire.span(
            "thread_service.list_replies_to_author", author_id=str(author_id)
        ):
            replies = await self.thread_repository.find_replies_to_author(author_id)
            logfire.info(
                "Activity loaded", author_id=str(author_id), count=len(replies)
            )
            return replies

    async def delete_subtrees(self, root_ids: list[ThreadId]) -> int:
        """Delete threads together with all their replies.

        Args:
            root_ids: Threads whose subtrees should be removed

        Returns:
            Number of threads deleted
        """
        ids: list[ThreadId] = []
        for root_id in root_ids:
            ids.extend(await self.collect_subtree_ids(root_id))
        ids = list(dict.fromkeys(ids))
        if not ids:
            return 0
        deleted = await self.thread_repository.delete_many(ids)
        logfire.info("Threads deleted", count=deleted)
        return deleted

    async def delete_thread(self, thread_id: ThreadId, requester_id: UserId) -> int:
        """Delete a thread and all its replies.

        Args:
            thread_id: Thread to delete
            requester_id: User asking for the deletion (must be the author)

        Returns:
            Number of threads deleted

        Raises:
            NotFoundError: If thread not found
            NotAuthorizedError: If the requester isn't the author
        """
        with logfire.span(
            "thread_service.delete_thread",
            thread_id=str(thread_id),
            requester_id=str(requester_id),
        ):
            thread = await self.get_by_id(thread_id)
            if thread.author_id != requester_id:
                raise NotAuthorizedError("thread", str(thread_id), str(requester_id))
            return await self.delete_subtrees([thread_id])
