"""Search communities use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from threads.application.usecase.base import BaseUseCase, operation
from threads.domain.service import CommunityService
from threads.domain.value import Page, SortOrder


class CommunityListItem(BaseModel):
    """Community in search results."""

    id: str
    handle: str
    name: str
    image: str | None
    bio: str | None
    member_count: int
    created_at: datetime


class SearchCommunitiesRequest(BaseModel):
    """Search communities request."""

    search_string: str = ""
    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1, le=100)
    sort_by: SortOrder = SortOrder.DESC


class SearchCommunitiesResponse(BaseModel):
    """Search communities response."""

    communities: list[CommunityListItem]
    is_next: bool


class SearchCommunitiesUseCase(BaseUseCase):
    """Use case for the communities page."""

    def __init__(self, community_service: CommunityService) -> None:
        self.community_service = community_service

    async def execute(
        self, request: SearchCommunitiesRequest
    ) -> SearchCommunitiesResponse:
        """Execute community search by handle or name."""
        with operation("Error fetching communities"):
            communities, is_next = await self.community_service.search_communities(
                query=request.search_string,
                page=Page(number=request.page_number, size=request.page_size),
                sort=request.sort_by,
            )
            return SearchCommunitiesResponse(
                communities=[
                    CommunityListItem(
                        id=str(c.id),
                        handle=c.handle.root,
                        name=c.name,
                        image=c.image,
                        bio=c.bio,
                        member_count=len(c.member_ids),
                        created_at=c.created_at,
                    )
                    for c in communities
                ],
                is_next=is_next,
            )
