"""Community domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from threads.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
)
from threads.domain.model import Community
from threads.domain.repository import CommunityRepository
from threads.domain.value import CommunityId, Page, SortOrder, UserId, Username

from .base import Service


class CommunityService(Service):
    """Domain service for community operations."""

    def __init__(self, community_repository: CommunityRepository) -> None:
        """Initialize community service.

        Args:
            community_repository: Community repository
        """
        self.community_repository = community_repository

    async def _ensure_handle_free(
        self, handle: Username, community_id: CommunityId | None = None
    ) -> None:
        owner = await self.community_repository.find_by_handle(handle)
        if owner and owner.id != community_id:
            logfire.warn("Community handle already taken", handle=handle.root)
            raise BusinessRuleViolationError(
                f"Community handle already taken: {handle.root}"
            )

    async def create_community(
        self,
        handle: Username,
        name: str,
        image: str | None,
        bio: str | None,
        creator_id: UserId,
    ) -> Community:
        """Create a community; the creator becomes its first member.

        Raises:
            BusinessRuleViolationError: If the handle is taken
        """
        with logfire.span(
            "community_service.create_community",
            handle=handle.root,
            creator_id=str(creator_id),
        ):
            await self._ensure_handle_free(handle)

            community = Community(
                id=CommunityId(uuid4()),
                handle=handle,
                name=name,
                image=image,
                bio=bio,
                created_by=creator_id,
                created_at=datetime.now(),
            )
            await self.community_repository.save(community)
            await self.community_repository.add_member(community.id, creator_id)

            logfire.info("Community created", community_id=str(community.id))
            return await self.get_by_id(community.id)

    async def get_by_id(self, community_id: CommunityId) -> Community:
        """Get community by ID.

        Raises:
            NotFoundError: If community not found
        """
        with logfire.span(
            "community_service.get_by_id", community_id=str(community_id)
        ):
            community = await self.community_repository.find_by_id(community_id)
            if not community:
                logfire.warn("Community not found", community_id=str(community_id))
                raise NotFoundError("Community", str(community_id))
            return community

    async def get_communities_by_ids(
        self, community_ids: list[CommunityId]
    ) -> dict[CommunityId, Community]:
        """Load several communities at once."""
        unique_ids = list(dict.fromkeys(community_ids))
        if not unique_ids:
            return {}
        communities = await self.community_repository.find_by_ids(unique_ids)
        return {community.id: community for community in communities}

    async def search_communities(
        self, query: str | None, page: Page, sort: SortOrder = SortOrder.DESC
    ) -> tuple[list[Community], bool]:
        """Search communities by handle or name.

        Returns:
            Communities on the page and whether a next page exists
        """
        query = query.strip() if query else None
        with logfire.span(
            "community_service.search_communities",
            query=query,
            page=page.number,
            size=page.size,
        ):
            communities = await self.community_repository.search(
                query=query or None, sort=sort, limit=page.size, offset=page.skip
            )
            total = await self.community_repository.count_search(query=query or None)
            return communities, page.has_next(total, len(communities))

    async def add_member(self, community_id: CommunityId, user_id: UserId) -> Community:
        """Add a user to a community.

        Raises:
            NotFoundError: If community not found
            BusinessRuleViolationError: If the user is already a member
        """
        with logfire.span(
            "community_service.add_member",
            community_id=str(community_id),
            user_id=str(user_id),
        ):
            community = await self.get_by_id(community_id)
            if user_id in community.member_ids:
                raise BusinessRuleViolationError(
                    "User is already a member of the community"
                )
            await self.community_repository.add_member(community_id, user_id)
            logfire.info("Member added", community_id=str(community_id))
            return await self.get_by_id(community_id)

    async def remove_member(
        self, community_id: CommunityId, user_id: UserId
    ) -> Community:
        """Remove a user from a community.

        Raises:
            NotFoundError: If community not found or the user isn't a member
        """
        with logfire.span(
            "community_service.remove_member",
            community_id=str(community_id),
            user_id=str(user_id),
        ):
            await self.get_by_id(community_id)
            removed = await self.community_repository.remove_member(
                community_id, user_id
            )
            if not removed:
                raise NotFoundError("Member", str(user_id))
            logfire.info("Member removed", community_id=str(community_id))
            return await self.get_by_id(community_id)

    def ensure_creator(self, community: Community, requester_id: UserId) -> None:
        """Check that a user created the community.

        Raises:
            NotAuthorizedError: If the requester isn't the creator
        """
        if community.created_by != requester_id:
            raise NotAuthorizedError(
                "community", str(community.id), str(requester_id)
            )

    async def update_info(
        self,
        community_id: CommunityId,
        requester_id: UserId,
        name: str | None = None,
        handle: Username | None = None,
        image: str | None = None,
    ) -> Community:
        """Update a community's name, handle or image.

        Fields left as None keep their current value.

        Raises:
            NotFoundError: If community not found
            NotAuthorizedError: If the requester isn't the creator
            BusinessRuleViolationError: If the new handle is taken
        """
        with logfire.span(
            "community_service.update_info", community_id=str(community_id)
        ):
            community = await self.get_by_id(community_id)
            self.ensure_creator(community, requester_id)

            if handle is not None:
                await self._ensure_handle_free(handle, community_id)

            updated = Community.model_validate(
                {
                    **community.model_dump(),
                    "name": name if name is not None else community.name,
                    "handle": handle if handle is not None else community.handle,
                    "image": image if image is not None else community.image,
                }
            )
            await self.community_repository.save(updated)
            logfire.info("Community updated", community_id=str(community_id))
            return await self.get_by_id(community_id)

    async def delete_community(self, community_id: CommunityId) -> None:
        """Delete a community and its memberships."""
        with logfire.span(
            "community_service.delete_community", community_id=str(community_id)
        ):
            await self.community_repository.delete(community_id)
            logfire.info("Community deleted", community_id=str(community_id))
