"""Create thread use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase, operation
from threads.domain.service import CommunityService, ThreadService, UserService
from threads.domain.value import CommunityId, UserId


class CreateThreadRequest(BaseModel):
    """Create thread request."""

    text: str
    author_id: str  # User ID from authenticated user
    community_id: str | None = None


class CreateThreadResponse(BaseModel):
    """Create thread response."""

    thread_id: str
    text: str
    author_id: str
    community_id: str | None
    created_at: datetime


class CreateThreadUseCase(BaseUseCase):
    """Use case for posting a new top-level thread."""

    def __init__(
        self,
        thread_service: ThreadService,
        user_service: UserService,
        community_service: CommunityService,
    ) -> None:
        """Initialize create thread use case.

        Args:
            thread_service: Thread domain service
            user_service: User domain service
            community_service: Community domain service
        """
        self.thread_service = thread_service
        self.user_service = user_service
        self.community_service = community_service

    async def execute(self, request: CreateThreadRequest) -> CreateThreadResponse:
        """Execute create thread flow.

        Steps:
        1. Verify the author exists
        2. Verify the community exists (if one was given)
        3. Insert the thread

        The thread then shows up in the author's and community's thread
        lists, which are derived from the thread's foreign keys.

        Raises:
            NotFoundError: If the author or community doesn't exist
            OperationError: On unexpected storage failures
        """
        with operation("Error creating thread"):
            author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))

            community_id = None
            if request.community_id:
                community = await self.community_service.get_by_id(
                    CommunityId(UUID(request.community_id))
                )
                community_id = community.id

            thread = await self.thread_service.create_thread(
                text=request.text,
                author_id=author.id,
                community_id=community_id,
            )

            return CreateThreadResponse(
                thread_id=str(thread.id),
                text=thread.text,
                author_id=str(thread.author_id),
                community_id=str(thread.community_id) if thread.community_id else None,
                created_at=thread.created_at,
            )
