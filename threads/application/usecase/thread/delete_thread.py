"""Delete thread use case."""

from uuid import UUID

from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase, operation
from threads.domain.service import ThreadService
from threads.domain.value import ThreadId, UserId


class DeleteThreadRequest(BaseModel):
    """Delete thread request."""

    thread_id: str
    requester_id: str  # User ID from authenticated user


class DeleteThreadResponse(BaseModel):
    """Delete thread response."""

    deleted_count: int  # The thread plus all its replies


class DeleteThreadUseCase(BaseUseCase):
    """Use case for deleting a thread and its whole reply subtree."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: DeleteThreadRequest) -> DeleteThreadResponse:
        """Execute delete thread flow.

        Raises:
            NotFoundError: If thread not found
            NotAuthorizedError: If the requester isn't the author
        """
        with operation("Error deleting thread"):
            deleted = await self.thread_service.delete_thread(
                ThreadId(UUID(request.thread_id)),
                UserId(UUID(request.requester_id)),
            )
            return DeleteThreadResponse(deleted_count=deleted)
