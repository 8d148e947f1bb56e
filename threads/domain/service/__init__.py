"""Domain services."""

from .base import Service
from .community_service import CommunityService
from .jwt_service import JWTService
from .thread_service import ThreadNode, ThreadService
from .user_service import UserService

__all__ = [
    "CommunityService",
    "JWTService",
    "Service",
    "ThreadNode",
    "ThreadService",
    "UserService",
]
