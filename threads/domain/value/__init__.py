"""Domain value objects for Threads."""

from threads.domain.value.identifiers import CommunityId, ThreadId, UserId
from threads.domain.value.types import ExternalId, Page, SortOrder, Username

__all__ = [
    # Identifiers
    "UserId",
    "ThreadId",
    "CommunityId",
    # Types
    "ExternalId",
    "Page",
    "SortOrder",
    "Username",
]
