"""Get community details use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase, operation
from threads.application.usecase.thread.card import AuthorSummary
from threads.domain.model import Community
from threads.domain.service import CommunityService, UserService
from threads.domain.value import CommunityId


class CommunityDetails(BaseModel):
    """Community with its creator and members populated."""

    id: str
    handle: str
    name: str
    image: str | None
    bio: str | None
    created_by: AuthorSummary | None
    members: list[AuthorSummary]
    thread_count: int
    created_at: datetime


async def load_details(
    community: Community, user_service: UserService
) -> CommunityDetails:
    """Populate a community's creator and members in one user query."""
    users = await user_service.get_users_by_ids(
        [community.created_by, *community.member_ids]
    )
    creator = users.get(community.created_by)
    return CommunityDetails(
        id=str(community.id),
        handle=community.handle.root,
        name=community.name,
        image=community.image,
        bio=community.bio,
        created_by=AuthorSummary.from_user(creator) if creator else None,
        members=[
            AuthorSummary.from_user(users[member_id])
            for member_id in community.member_ids
            if member_id in users
        ],
        thread_count=len(community.thread_ids),
        created_at=community.created_at,
    )


class GetCommunityRequest(BaseModel):
    """Get community request."""

    community_id: str


class GetCommunityUseCase(BaseUseCase):
    """Use case for the community page header."""

    def __init__(
        self, community_service: CommunityService, user_service: UserService
    ) -> None:
        self.community_service = community_service
        self.user_service = user_service

    async def execute(self, request: GetCommunityRequest) -> CommunityDetails:
        """Execute get community flow.

        Raises:
            NotFoundError: If community not found
        """
        with operation("Error fetching community details"):
            community = await self.community_service.get_by_id(
                CommunityId(UUID(request.community_id))
            )
            return await load_details(community, self.user_service)
