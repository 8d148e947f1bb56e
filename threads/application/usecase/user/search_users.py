"""Search users use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from threads.application.usecase.base import BaseUseCase, operation
from threads.domain.service import UserService
from threads.domain.value import Page, SortOrder, UserId


class UserListItem(BaseModel):
    """User in search results."""

    id: str
    external_id: str
    username: str
    name: str
    image: str | None
    created_at: datetime


class SearchUsersRequest(BaseModel):
    """Search users request."""

    current_user_id: str  # Always left out of the results
    search_string: str = ""
    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1, le=100)
    sort_by: SortOrder = SortOrder.DESC


class SearchUsersResponse(BaseModel):
    """Search users response."""

    users: list[UserListItem]
    is_next: bool


class SearchUsersUseCase(BaseUseCase):
    """Use case for the user search page."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: SearchUsersRequest) -> SearchUsersResponse:
        """Execute user search.

        Matches usernames and names case-insensitively; a blank search
        string matches every other user.
        """
        with logfire.span(
            "search_users.execute",
            search_string=request.search_string,
            page_number=request.page_number,
        ), operation("Failed to fetch users"):
            users, is_next = await self.user_service.search_users(
                exclude_id=UserId(UUID(request.current_user_id)),
                query=request.search_string,
                page=Page(number=request.page_number, size=request.page_size),
                sort=request.sort_by,
            )
            return SearchUsersResponse(
                users=[
                    UserListItem(
                        id=str(user.id),
                        external_id=user.external_id.root,
                        username=user.username.root,
                        name=user.name,
                        image=user.image,
                        created_at=user.created_at,
                    )
                    for user in users
                ],
                is_next=is_next,
            )
