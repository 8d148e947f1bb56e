"""User use cases."""

from .get_activity import (
    ActivityItem,
    GetActivityRequest,
    GetActivityResponse,
    GetActivityUseCase,
)
from .get_user import GetUserRequest, GetUserUseCase, UserProfile
from .search_users import (
    SearchUsersRequest,
    SearchUsersResponse,
    SearchUsersUseCase,
    UserListItem,
)
from .update_user import UpdateUserRequest, UpdateUserUseCase

__all__ = [
    "ActivityItem",
    "GetActivityRequest",
    "GetActivityResponse",
    "GetActivityUseCase",
    "GetUserRequest",
    "GetUserUseCase",
    "SearchUsersRequest",
    "SearchUsersResponse",
    "SearchUsersUseCase",
    "UpdateUserRequest",
    "UpdateUserUseCase",
    "UserListItem",
    "UserProfile",
]
