"""List user threads use case."""

from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase, operation
from threads.application.usecase.thread.card import (
    AuthorSummary,
    ThreadCard,
    ThreadCardBuilder,
)
from threads.domain.service import ThreadService, UserService
from threads.domain.value import ExternalId


class ListUserThreadsRequest(BaseModel):
    """List user threads request."""

    external_id: str


class ListUserThreadsResponse(BaseModel):
    """List user threads response."""

    user: AuthorSummary
    threads: list[ThreadCard]


class ListUserThreadsUseCase(BaseUseCase):
    """Use case for the threads tab of a profile page."""

    def __init__(
        self,
        user_service: UserService,
        thread_service: ThreadService,
        card_builder: ThreadCardBuilder,
    ) -> None:
        self.user_service = user_service
        self.thread_service = thread_service
        self.card_builder = card_builder

    async def execute(self, request: ListUserThreadsRequest) -> ListUserThreadsResponse:
        """Execute list user threads flow.

        Returns:
            The user's top-level threads, newest first

        Raises:
            NotFoundError: If user not found
        """
        with operation("Error fetching user threads"):
            user = await self.user_service.require_by_external_id(
                ExternalId(request.external_id)
            )
            threads = await self.thread_service.list_by_author(user.id)
            cards = await self.card_builder.build(threads)
            return ListUserThreadsResponse(
                user=AuthorSummary.from_user(user), threads=cards
            )
