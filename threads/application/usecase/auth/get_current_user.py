"""Get current user use case."""

from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase, operation
from threads.application.usecase.user.get_user import UserProfile, load_profile
from threads.domain.service import CommunityService, JWTService, UserService
from threads.domain.value import ExternalId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT issued by the identity provider


class GetCurrentUserResponse(BaseModel):
    """Get current user response.

    ``user`` is None until the external id has been onboarded.
    """

    external_id: str
    onboarded: bool
    user: UserProfile | None


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for resolving the signed-in user from a token."""

    def __init__(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        community_service: CommunityService,
    ) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
            community_service: Community domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service
        self.community_service = community_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Look up the profile by the token's external id

        Raises:
            JWTError: If token is invalid or expired
        """
        payload = self.jwt_service.verify_token(request.token)

        with operation("Failed to fetch user"):
            user = await self.user_service.get_by_external_id(
                ExternalId(payload.external_id)
            )
            profile = (
                await load_profile(user, self.community_service) if user else None
            )

            return GetCurrentUserResponse(
                external_id=payload.external_id,
                onboarded=bool(user and user.onboarded),
                user=profile,
            )
