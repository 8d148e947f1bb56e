"""Domain model entities for Threads."""

from threads.domain.model.community import Community
from threads.domain.model.thread import Thread
from threads.domain.model.user import User

__all__ = [
    "User",
    "Thread",
    "Community",
]
