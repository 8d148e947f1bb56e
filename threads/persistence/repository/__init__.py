"""PostgreSQL repository implementations."""

from threads.persistence.repository.community import PostgresCommunityRepository
from threads.persistence.repository.thread import PostgresThreadRepository
from threads.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresThreadRepository",
    "PostgresCommunityRepository",
]
