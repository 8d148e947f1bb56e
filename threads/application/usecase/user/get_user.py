"""Get user use case."""

from datetime import datetime

from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase, operation
from threads.application.usecase.thread.card import CommunitySummary
from threads.domain.model import User
from threads.domain.service import CommunityService, UserService
from threads.domain.value import ExternalId


class UserProfile(BaseModel):
    """Public profile of a user."""

    id: str
    external_id: str
    username: str
    name: str
    bio: str | None
    image: str | None
    onboarded: bool
    thread_ids: list[str]
    communities: list[CommunitySummary]
    created_at: datetime

    @classmethod
    def from_user(
        cls, user: User, communities: list[CommunitySummary]
    ) -> "UserProfile":
        return cls(
            id=str(user.id),
            external_id=user.external_id.root,
            username=user.username.root,
            name=user.name,
            bio=user.bio,
            image=user.image,
            onboarded=user.onboarded,
            thread_ids=[str(tid) for tid in user.thread_ids],
            communities=communities,
            created_at=user.created_at,
        )


async def load_profile(user: User, community_service: CommunityService) -> UserProfile:
    """Build a profile with the user's communities populated."""
    communities = await community_service.get_communities_by_ids(user.community_ids)
    return UserProfile.from_user(
        user,
        [
            CommunitySummary.from_community(communities[cid])
            for cid in user.community_ids
            if cid in communities
        ],
    )


class GetUserRequest(BaseModel):
    """Get user request."""

    external_id: str


class GetUserUseCase(BaseUseCase):
    """Use case for viewing a profile."""

    def __init__(
        self, user_service: UserService, community_service: CommunityService
    ) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
            community_service: Community domain service
        """
        self.user_service = user_service
        self.community_service = community_service

    async def execute(self, request: GetUserRequest) -> UserProfile:
        """Execute get user flow.

        Raises:
            NotFoundError: If no user has this external id
            OperationError: On unexpected storage failures
        """
        with operation("Failed to fetch user"):
            user = await self.user_service.require_by_external_id(
                ExternalId(request.external_id)
            )
            return await load_profile(user, self.community_service)
