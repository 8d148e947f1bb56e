"""Create community use case."""

from uuid import UUID

from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase, operation
from threads.application.usecase.community.get_community import (
    CommunityDetails,
    load_details,
)
from threads.domain.service import CommunityService, UserService
from threads.domain.value import UserId, Username


class CreateCommunityRequest(BaseModel):
    """Create community request."""

    handle: str
    name: str
    image: str | None = None
    bio: str | None = None
    creator_id: str  # User ID from authenticated user


class CreateCommunityUseCase(BaseUseCase):
    """Use case for creating a community."""

    def __init__(
        self, community_service: CommunityService, user_service: UserService
    ) -> None:
        """Initialize create community use case.

        Args:
            community_service: Community domain service
            user_service: User domain service
        """
        self.community_service = community_service
        self.user_service = user_service

    async def execute(self, request: CreateCommunityRequest) -> CommunityDetails:
        """Execute create community flow.

        The creator becomes the first member.

        Raises:
            NotFoundError: If the creator doesn't exist
            BusinessRuleViolationError: If the handle is taken
        """
        with operation("Error creating community"):
            creator = await self.user_service.get_by_id(
                UserId(UUID(request.creator_id))
            )
            community = await self.community_service.create_community(
                handle=Username(request.handle),
                name=request.name,
                image=request.image,
                bio=request.bio,
                creator_id=creator.id,
            )
            return await load_details(community, self.user_service)
