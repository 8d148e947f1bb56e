"""Reply to thread use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase, operation
from threads.domain.service import ThreadService, UserService
from threads.domain.value import ThreadId, UserId


class ReplyToThreadRequest(BaseModel):
    """Reply to thread request."""

    thread_id: str  # Parent thread
    text: str
    author_id: str  # User ID from authenticated user


class ReplyToThreadResponse(BaseModel):
    """Reply to thread response."""

    thread_id: str
    parent_id: str
    text: str
    author_id: str
    created_at: datetime


class ReplyToThreadUseCase(BaseUseCase):
    """Use case for adding a comment to a thread."""

    def __init__(self, thread_service: ThreadService, user_service: UserService) -> None:
        """Initialize reply use case.

        Args:
            thread_service: Thread domain service
            user_service: User domain service
        """
        self.thread_service = thread_service
        self.user_service = user_service

    async def execute(self, request: ReplyToThreadRequest) -> ReplyToThreadResponse:
        """Execute reply flow.

        The reply becomes one of the parent's children; the parent's
        ``child_ids`` is derived from it.

        Raises:
            NotFoundError: If the author or parent thread doesn't exist
            OperationError: On unexpected storage failures
        """
        with operation("Error adding comment to thread"):
            author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))
            reply = await self.thread_service.create_thread(
                text=request.text,
                author_id=author.id,
                parent_id=ThreadId(UUID(request.thread_id)),
            )

            return ReplyToThreadResponse(
                thread_id=str(reply.id),
                parent_id=str(reply.parent_id),
                text=reply.text,
                author_id=str(reply.author_id),
                created_at=reply.created_at,
            )
