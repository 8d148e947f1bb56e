"""Delete community use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase, operation
from threads.domain.service import CommunityService, ThreadService
from threads.domain.value import CommunityId, UserId


class DeleteCommunityRequest(BaseModel):
    """Delete community request."""

    community_id: str
    requester_id: str  # User ID from authenticated user


class DeleteCommunityResponse(BaseModel):
    """Delete community response."""

    community_id: str
    deleted_threads: int


class DeleteCommunityUseCase(BaseUseCase):
    """Use case for deleting a community with its threads and memberships."""

    def __init__(
        self, community_service: CommunityService, thread_service: ThreadService
    ) -> None:
        """Initialize delete community use case.

        Args:
            community_service: Community domain service
            thread_service: Thread domain service
        """
        self.community_service = community_service
        self.thread_service = thread_service

    async def execute(self, request: DeleteCommunityRequest) -> DeleteCommunityResponse:
        """Execute delete community flow.

        Steps:
        1. Check the requester created the community
        2. Delete the community's threads and all their replies
        3. Delete the community and its memberships

        Raises:
            NotFoundError: If community not found
            NotAuthorizedError: If the requester isn't the creator
        """
        with operation("Error deleting community"):
            community = await self.community_service.get_by_id(
                CommunityId(UUID(request.community_id))
            )
            self.community_service.ensure_creator(
                community, UserId(UUID(request.requester_id))
            )

            deleted_threads = await self.thread_service.delete_subtrees(
                list(community.thread_ids)
            )
            await self.community_service.delete_community(community.id)

            logfire.info(
                "Community deleted with threads",
                community_id=str(community.id),
                deleted_threads=deleted_threads,
            )
            return DeleteCommunityResponse(
                community_id=str(community.id), deleted_threads=deleted_threads
            )
