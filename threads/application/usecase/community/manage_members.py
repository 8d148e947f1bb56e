"""Community membership use cases."""

from uuid import UUID

from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase, operation
from threads.application.usecase.community.get_community import (
    CommunityDetails,
    load_details,
)
from threads.domain.service import CommunityService, UserService
from threads.domain.value import CommunityId, UserId


class MembershipRequest(BaseModel):
    """Add or remove a community member."""

    community_id: str
    user_id: str  # Member being added or removed
    requester_id: str  # User ID from authenticated user


class AddMemberUseCase(BaseUseCase):
    """Use case for joining a community or adding someone to it.

    Users may add themselves; only the creator may add other users.
    """

    def __init__(
        self, community_service: CommunityService, user_service: UserService
    ) -> None:
        self.community_service = community_service
        self.user_service = user_service

    async def execute(self, request: MembershipRequest) -> CommunityDetails:
        """Execute add member flow.

        Raises:
            NotFoundError: If the community or user doesn't exist
            NotAuthorizedError: If adding someone else without being the creator
            BusinessRuleViolationError: If the user is already a member
        """
        with operation("Error adding member to community"):
            community_id = CommunityId(UUID(request.community_id))
            user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
            requester_id = UserId(UUID(request.requester_id))

            if requester_id != user.id:
                community = await self.community_service.get_by_id(community_id)
                self.community_service.ensure_creator(community, requester_id)

            community = await self.community_service.add_member(community_id, user.id)
            return await load_details(community, self.user_service)


class RemoveMemberUseCase(BaseUseCase):
    """Use case for leaving a community or removing someone from it.

    Users may remove themselves; only the creator may remove other users.
    """

    def __init__(
        self, community_service: CommunityService, user_service: UserService
    ) -> None:
        self.community_service = community_service
        self.user_service = user_service

    async def execute(self, request: MembershipRequest) -> CommunityDetails:
        """Execute remove member flow.

        Raises:
            NotFoundError: If the community doesn't exist or the user isn't a member
            NotAuthorizedError: If removing someone else without being the creator
        """
        with operation("Error removing member from community"):
            community_id = CommunityId(UUID(request.community_id))
            user_id = UserId(UUID(request.user_id))
            requester_id = UserId(UUID(request.requester_id))

            if requester_id != user_id:
                community = await self.community_service.get_by_id(community_id)
                self.community_service.ensure_creator(community, requester_id)

            community = await self.community_service.remove_member(
                community_id, user_id
            )
            return await load_details(community, self.user_service)
