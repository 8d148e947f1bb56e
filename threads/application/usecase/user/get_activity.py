"""Get activity use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase, operation
from threads.application.usecase.thread.card import AuthorSummary
from threads.domain.service import ThreadService, UserService
from threads.domain.value import UserId


class ActivityItem(BaseModel):
    """A reply someone else left on one of the user's threads."""

    thread_id: str
    parent_id: str
    text: str
    author: AuthorSummary | None
    created_at: datetime


class GetActivityRequest(BaseModel):
    """Get activity request."""

    user_id: str


class GetActivityResponse(BaseModel):
    """Get activity response."""

    activity: list[ActivityItem]


class GetActivityUseCase(BaseUseCase):
    """Use case for the activity page."""

    def __init__(self, thread_service: ThreadService, user_service: UserService) -> None:
        """Initialize get activity use case.

        Args:
            thread_service: Thread domain service
            user_service: User domain service
        """
        self.thread_service = thread_service
        self.user_service = user_service

    async def execute(self, request: GetActivityRequest) -> GetActivityResponse:
        """Execute get activity flow.

        Returns:
            Replies by other users to any of the user's threads, newest first.
            The user's own replies are never included.
        """
        with operation("Failed to fetch activity"):
            replies = await self.thread_service.list_replies_to_author(
                UserId(UUID(request.user_id))
            )
            authors = await self.user_service.get_users_by_ids(
                [reply.author_id for reply in replies]
            )
            return GetActivityResponse(
                activity=[
                    ActivityItem(
                        thread_id=str(reply.id),
                        parent_id=str(reply.parent_id),
                        text=reply.text,
                        author=(
                            AuthorSummary.from_user(authors[reply.author_id])
                            if reply.author_id in authors
                            else None
                        ),
                        created_at=reply.created_at,
                    )
                    for reply in replies
                ]
            )
