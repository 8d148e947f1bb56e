"""Update community use case."""

from uuid import UUID

from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase, operation
from threads.application.usecase.community.get_community import (
    CommunityDetails,
    load_details,
)
from threads.domain.service import CommunityService, UserService
from threads.domain.value import CommunityId, UserId, Username


class UpdateCommunityRequest(BaseModel):
    """Update community request.

    Fields left as None are unchanged.
    """

    community_id: str
    requester_id: str  # User ID from authenticated user
    name: str | None = None
    handle: str | None = None
    image: str | None = None


class UpdateCommunityUseCase(BaseUseCase):
    """Use case for editing a community's info."""

    def __init__(
        self, community_service: CommunityService, user_service: UserService
    ) -> None:
        self.community_service = community_service
        self.user_service = user_service

    async def execute(self, request: UpdateCommunityRequest) -> CommunityDetails:
        """Execute update community flow.

        Raises:
            NotFoundError: If community not found
            NotAuthorizedError: If the requester isn't the creator
            BusinessRuleViolationError: If the new handle is taken
        """
        with operation("Error updating community information"):
            community = await self.community_service.update_info(
                community_id=CommunityId(UUID(request.community_id)),
                requester_id=UserId(UUID(request.requester_id)),
                name=request.name,
                handle=Username(request.handle) if request.handle else None,
                image=request.image,
            )
            return await load_details(community, self.user_service)
