"""Community use cases."""

from .create_community import CreateCommunityRequest, CreateCommunityUseCase
from .delete_community import (
    DeleteCommunityRequest,
    DeleteCommunityResponse,
    DeleteCommunityUseCase,
)
from .get_community import CommunityDetails, GetCommunityRequest, GetCommunityUseCase
from .list_community_threads import (
    ListCommunityThreadsRequest,
    ListCommunityThreadsResponse,
    ListCommunityThreadsUseCase,
)
from .manage_members import AddMemberUseCase, MembershipRequest, RemoveMemberUseCase
from .search_communities import (
    CommunityListItem,
    SearchCommunitiesRequest,
    SearchCommunitiesResponse,
    SearchCommunitiesUseCase,
)
from .update_community import UpdateCommunityRequest, UpdateCommunityUseCase

__all__ = [
    "AddMemberUseCase",
    "CommunityDetails",
    "CommunityListItem",
    "CreateCommunityRequest",
    "CreateCommunityUseCase",
    "DeleteCommunityRequest",
    "DeleteCommunityResponse",
    "DeleteCommunityUseCase",
    "GetCommunityRequest",
    "GetCommunityUseCase",
    "ListCommunityThreadsRequest",
    "ListCommunityThreadsResponse",
    "ListCommunityThreadsUseCase",
    "MembershipRequest",
    "RemoveMemberUseCase",
    "SearchCommunitiesRequest",
    "SearchCommunitiesResponse",
    "SearchCommunitiesUseCase",
    "UpdateCommunityRequest",
    "UpdateCommunityUseCase",
]
