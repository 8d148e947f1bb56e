"""Strongly typed identifiers for Threads domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
ThreadId = NewType("ThreadId", UUID)
CommunityId = NewType("CommunityId", UUID)
