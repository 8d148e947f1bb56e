"""List community threads use case."""

from uuid import UUID

from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase, operation
from threads.application.usecase.thread.card import (
    CommunitySummary,
    ThreadCard,
    ThreadCardBuilder,
)
from threads.domain.service import CommunityService, ThreadService
from threads.domain.value import CommunityId


class ListCommunityThreadsRequest(BaseModel):
    """List community threads request."""

    community_id: str


class ListCommunityThreadsResponse(BaseModel):
    """List community threads response."""

    community: CommunitySummary
    threads: list[ThreadCard]


class ListCommunityThreadsUseCase(BaseUseCase):
    """Use case for the threads tab of a community page."""

    def __init__(
        self,
        community_service: CommunityService,
        thread_service: ThreadService,
        card_builder: ThreadCardBuilder,
    ) -> None:
        self.community_service = community_service
        self.thread_service = thread_service
        self.card_builder = card_builder

    async def execute(
        self, request: ListCommunityThreadsRequest
    ) -> ListCommunityThreadsResponse:
        """Execute list community threads flow.

        Returns:
            The community's threads, newest first, populated like the feed

        Raises:
            NotFoundError: If community not found
        """
        with operation("Error fetching community threads"):
            community = await self.community_service.get_by_id(
                CommunityId(UUID(request.community_id))
            )
            threads = await self.thread_service.list_by_community(community.id)
            return ListCommunityThreadsResponse(
                community=CommunitySummary.from_community(community),
                threads=await self.card_builder.build(threads),
            )
