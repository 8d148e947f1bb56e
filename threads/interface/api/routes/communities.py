"""Community routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from pydantic import BaseModel, Field

from threads.application.usecase.auth import GetCurrentUserUseCase
from threads.application.usecase.community import (
    AddMemberUseCase,
    CommunityDetails,
    CreateCommunityRequest,
    CreateCommunityUseCase,
    DeleteCommunityRequest,
    DeleteCommunityResponse,
    DeleteCommunityUseCase,
    GetCommunityRequest,
    GetCommunityUseCase,
    ListCommunityThreadsRequest,
    ListCommunityThreadsResponse,
    ListCommunityThreadsUseCase,
    MembershipRequest,
    RemoveMemberUseCase,
    SearchCommunitiesRequest,
    SearchCommunitiesResponse,
    SearchCommunitiesUseCase,
    UpdateCommunityRequest,
    UpdateCommunityUseCase,
)
from threads.config import AuthSettings, PaginationSettings
from threads.domain.value import SortOrder
from threads.interface.api.auth import require_profile
from threads.interface.error import to_http_exception

router = APIRouter(
    prefix="/communities", tags=["communities"], route_class=DishkaRoute
)


class CreateCommunityAPIRequest(BaseModel):
    """API request for creating a community."""

    handle: str = Field(min_length=3, max_length=30)
    name: str = Field(min_length=1, max_length=50)
    image: str | None = None
    bio: str | None = Field(default=None, max_length=1000)


class UpdateCommunityAPIRequest(BaseModel):
    """API request for editing a community. Omitted fields are kept."""

    name: str | None = Field(default=None, min_length=1, max_length=50)
    handle: str | None = Field(default=None, min_length=3, max_length=30)
    image: str | None = None


class AddMemberAPIRequest(BaseModel):
    """API request for adding a member. Defaults to the signed-in user."""

    user_id: UUID | None = None


@router.post("", response_model=CommunityDetails, status_code=status.HTTP_201_CREATED)
async def create_community(
    body: CreateCommunityAPIRequest,
    request: Request,
    create_community_use_case: FromDishka[CreateCommunityUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> CommunityDetails:
    """Create a community. The creator joins it as the first member."""
    user = await require_profile(request, get_current_user_use_case, auth_settings)

    try:
        return await create_community_use_case.execute(
            CreateCommunityRequest(
                handle=body.handle,
                name=body.name,
                image=body.image,
                bio=body.bio,
                creator_id=user.id,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "create community") from e


@router.get("", response_model=SearchCommunitiesResponse)
async def search_communities(
    search_communities_use_case: FromDishka[SearchCommunitiesUseCase],
    pagination: FromDishka[PaginationSettings],
    search_string: str = "",
    page_number: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1, le=100),
    sort_by: SortOrder = SortOrder.DESC,
) -> SearchCommunitiesResponse:
    """Search communities by handle or name."""
    size = min(
        page_size or pagination.communities_page_size, pagination.max_page_size
    )
    try:
        return await search_communities_use_case.execute(
            SearchCommunitiesRequest(
                search_string=search_string,
                page_number=page_number,
                page_size=size,
                sort_by=sort_by,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "fetch communities") from e


@router.get("/{community_id}", response_model=CommunityDetails)
async def get_community(
    community_id: UUID,
    get_community_use_case: FromDishka[GetCommunityUseCase],
) -> CommunityDetails:
    """Community details with creator and members."""
    try:
        return await get_community_use_case.execute(
            GetCommunityRequest(community_id=str(community_id))
        )
    except Exception as e:
        raise to_http_exception(e, "fetch community") from e


@router.patch("/{community_id}", response_model=CommunityDetails)
async def update_community(
    community_id: UUID,
    body: UpdateCommunityAPIRequest,
    request: Request,
    update_community_use_case: FromDishka[UpdateCommunityUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> CommunityDetails:
    """Update community info. Only the creator may do this."""
    user = await require_profile(request, get_current_user_use_case, auth_settings)

    try:
        return await update_community_use_case.execute(
            UpdateCommunityRequest(
                community_id=str(community_id),
                requester_id=user.id,
                name=body.name,
                handle=body.handle,
                image=body.image,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update community") from e


@router.delete("/{community_id}", response_model=DeleteCommunityResponse)
async def delete_community(
    community_id: UUID,
    request: Request,
    delete_community_use_case: FromDishka[DeleteCommunityUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> DeleteCommunityResponse:
    """Delete a community, its memberships and its threads."""
    user = await require_profile(request, get_current_user_use_case, auth_settings)

    try:
        return await delete_community_use_case.execute(
            DeleteCommunityRequest(
                community_id=str(community_id), requester_id=user.id
            )
        )
    except Exception as e:
        raise to_http_exception(e, "delete community") from e


@router.get("/{community_id}/threads", response_model=ListCommunityThreadsResponse)
async def get_community_threads(
    community_id: UUID,
    list_community_threads_use_case: FromDishka[ListCommunityThreadsUseCase],
) -> ListCommunityThreadsResponse:
    """Threads posted to a community, newest first."""
    try:
        return await list_community_threads_use_case.execute(
            ListCommunityThreadsRequest(community_id=str(community_id))
        )
    except Exception as e:
        raise to_http_exception(e, "fetch community threads") from e


@router.post("/{community_id}/members", response_model=CommunityDetails)
async def add_member(
    community_id: UUID,
    request: Request,
    add_member_use_case: FromDishka[AddMemberUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_settings: FromDishka[AuthSettings],
    body: AddMemberAPIRequest | None = None,
) -> CommunityDetails:
    """Join a community, or add another user as its creator."""
    user = await require_profile(request, get_current_user_use_case, auth_settings)
    member_id = str(body.user_id) if body and body.user_id else user.id

    try:
        return await add_member_use_case.execute(
            MembershipRequest(
                community_id=str(community_id),
                user_id=member_id,
                requester_id=user.id,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "add member to community") from e


@router.delete("/{community_id}/members/{user_id}", response_model=CommunityDetails)
async def remove_member(
    community_id: UUID,
    user_id: UUID,
    request: Request,
    remove_member_use_case: FromDishka[RemoveMemberUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> CommunityDetails:
    """Leave a community, or remove a member as its creator."""
    user = await require_profile(request, get_current_user_use_case, auth_settings)

    try:
        return await remove_member_use_case.execute(
            MembershipRequest(
                community_id=str(community_id),
                user_id=str(user_id),
                requester_id=user.id,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "remove member from community") from e
