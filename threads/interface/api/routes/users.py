"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request
from pydantic import BaseModel, Field

from threads.application.usecase.auth import GetCurrentUserUseCase
from threads.application.usecase.thread import (
    ListUserThreadsRequest,
    ListUserThreadsResponse,
    ListUserThreadsUseCase,
)
from threads.application.usecase.user import (
    GetActivityRequest,
    GetActivityResponse,
    GetActivityUseCase,
    GetUserRequest,
    GetUserUseCase,
    SearchUsersRequest,
    SearchUsersResponse,
    SearchUsersUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
    UserProfile,
)
from threads.config import AuthSettings, PaginationSettings
from threads.domain.value import SortOrder
from threads.interface.api.auth import authenticate, require_profile
from threads.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserAPIRequest(BaseModel):
    """API request for onboarding or editing a profile."""

    username: str = Field(min_length=3, max_length=30)
    name: str = Field(min_length=1, max_length=30)
    bio: str | None = Field(default=None, max_length=1000)
    image: str | None = None


@router.put("/me", response_model=UserProfile)
async def update_me(
    body: UpdateUserAPIRequest,
    request: Request,
    update_user_use_case: FromDishka[UpdateUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> UserProfile:
    """Create or update the signed-in user's profile.

    Works before onboarding: this is the call that onboards the user.
    """
    current = await authenticate(request, get_current_user_use_case, auth_settings)

    try:
        return await update_user_use_case.execute(
            UpdateUserRequest(
                external_id=current.external_id,
                username=body.username,
                name=body.name,
                bio=body.bio,
                image=body.image,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update user") from e


@router.get("", response_model=SearchUsersResponse)
async def search_users(
    request: Request,
    search_users_use_case: FromDishka[SearchUsersUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_settings: FromDishka[AuthSettings],
    pagination: FromDishka[PaginationSettings],
    search_string: str = "",
    page_number: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1, le=100),
    sort_by: SortOrder = SortOrder.DESC,
) -> SearchUsersResponse:
    """Search other users by username or name."""
    user = await require_profile(request, get_current_user_use_case, auth_settings)
    size = min(page_size or pagination.users_page_size, pagination.max_page_size)

    try:
        return await search_users_use_case.execute(
            SearchUsersRequest(
                current_user_id=user.id,
                search_string=search_string,
                page_number=page_number,
                page_size=size,
                sort_by=sort_by,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "fetch users") from e


@router.get("/me/activity", response_model=GetActivityResponse)
async def get_my_activity(
    request: Request,
    get_activity_use_case: FromDishka[GetActivityUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> GetActivityResponse:
    """Replies other users left on the signed-in user's threads."""
    user = await require_profile(request, get_current_user_use_case, auth_settings)

    try:
        return await get_activity_use_case.execute(GetActivityRequest(user_id=user.id))
    except Exception as e:
        raise to_http_exception(e, "fetch activity") from e


@router.get("/{external_id}", response_model=UserProfile)
async def get_user(
    external_id: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserProfile:
    """A user's public profile with their communities."""
    try:
        return await get_user_use_case.execute(GetUserRequest(external_id=external_id))
    except Exception as e:
        raise to_http_exception(e, "fetch user") from e


@router.get("/{external_id}/threads", response_model=ListUserThreadsResponse)
async def get_user_threads(
    external_id: str,
    list_user_threads_use_case: FromDishka[ListUserThreadsUseCase],
) -> ListUserThreadsResponse:
    """A user's top-level threads, newest first."""
    try:
        return await list_user_threads_use_case.execute(
            ListUserThreadsRequest(external_id=external_id)
        )
    except Exception as e:
        raise to_http_exception(e, "fetch user threads") from e
