"""Get thread use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase, operation
from threads.application.usecase.thread.card import AuthorSummary, CommunitySummary
from threads.config import ThreadSettings
from threads.domain.model import User
from threads.domain.service import (
    CommunityService,
    ThreadNode,
    ThreadService,
    UserService,
)
from threads.domain.value import ThreadId, UserId


class ThreadTreeNode(BaseModel):
    """A thread in the nested reply tree."""

    thread_id: str
    text: str
    parent_id: str | None
    author: AuthorSummary | None
    created_at: datetime
    replies: list["ThreadTreeNode"]


class GetThreadRequest(BaseModel):
    """Get thread request."""

    thread_id: str


class GetThreadResponse(BaseModel):
    """Get thread response."""

    thread: ThreadTreeNode
    community: CommunitySummary | None


class GetThreadUseCase(BaseUseCase):
    """Use case for viewing a thread with its full reply tree."""

    def __init__(
        self,
        thread_service: ThreadService,
        user_service: UserService,
        community_service: CommunityService,
        thread_settings: ThreadSettings,
    ) -> None:
        """Initialize get thread use case.

        Args:
            thread_service: Thread domain service
            user_service: User domain service
            community_service: Community domain service
            thread_settings: Reply tree limits
        """
        self.thread_service = thread_service
        self.user_service = user_service
        self.community_service = community_service
        self.thread_settings = thread_settings

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        Steps:
        1. Load the thread
        2. Load the reply tree one level at a time
        3. Load every author in the tree in one batch

        Raises:
            NotFoundError: If thread not found
            OperationError: On unexpected storage failures
        """
        with logfire.span(
            "get_thread.execute", thread_id=request.thread_id
        ), operation("Error fetching thread"):
            root = await self.thread_service.get_by_id(ThreadId(UUID(request.thread_id)))
            tree = await self.thread_service.build_reply_tree(
                root, max_depth=self.thread_settings.max_reply_depth
            )

            authors = await self.user_service.get_users_by_ids(
                [thread.author_id for thread in tree.walk()]
            )

            community = None
            if root.community_id:
                communities = await self.community_service.get_communities_by_ids(
                    [root.community_id]
                )
                found = communities.get(root.community_id)
                community = CommunitySummary.from_community(found) if found else None

            return GetThreadResponse(
                thread=_to_response(tree, authors), community=community
            )


def _to_response(node: ThreadNode, authors: dict[UserId, User]) -> ThreadTreeNode:
    thread = node.thread
    author = authors.get(thread.author_id)
    return ThreadTreeNode(
        thread_id=str(thread.id),
        text=thread.text,
        parent_id=str(thread.parent_id) if thread.parent_id else None,
        author=AuthorSummary.from_user(author) if author else None,
        created_at=thread.created_at,
        replies=[_to_response(child, authors) for child in node.children],
    )
