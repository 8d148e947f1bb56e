"""In-memory repository implementations for testing."""

from .community import InMemoryCommunityRepository
from .store import InMemoryStore
from .thread import InMemoryThreadRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommunityRepository",
    "InMemoryStore",
    "InMemoryThreadRepository",
    "InMemoryUserRepository",
]
