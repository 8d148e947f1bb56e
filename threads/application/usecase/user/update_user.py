"""Update user use case."""

from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase, operation
from threads.application.usecase.user.get_user import UserProfile, load_profile
from threads.domain.service import CommunityService, UserService
from threads.domain.value import ExternalId, Username


class UpdateUserRequest(BaseModel):
    """Update user request."""

    external_id: str  # From the verified token
    username: str
    name: str
    bio: str | None = None
    image: str | None = None


class UpdateUserUseCase(BaseUseCase):
    """Use case for onboarding and profile edits.

    Creates the profile on first call and updates it afterwards; either way
    the user ends up onboarded.
    """

    def __init__(
        self, user_service: UserService, community_service: CommunityService
    ) -> None:
        """Initialize update user use case.

        Args:
            user_service: User domain service
            community_service: Community domain service
        """
        self.user_service = user_service
        self.community_service = community_service

    async def execute(self, request: UpdateUserRequest) -> UserProfile:
        """Execute update user flow.

        Raises:
            ValidationError: If the username or profile fields are invalid
            BusinessRuleViolationError: If the username is taken
            OperationError: On unexpected storage failures
        """
        with operation("Failed to create/update user"):
            user = await self.user_service.upsert_profile(
                external_id=ExternalId(request.external_id),
                username=Username(request.username),
                name=request.name,
                bio=request.bio,
                image=request.image,
            )
            return await load_profile(user, self.community_service)
