"""Thread entity.

A thread is either a top-level post or a reply to another thread. Replies
point at their parent; a thread's children are the replies pointing at it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from threads.domain.model.common import DomainModel
from threads.domain.value import CommunityId, ThreadId, UserId


class Thread(DomainModel):
    """Thread entity.

    Threading is managed through:
    - parent_id: Direct parent thread (None for top-level posts)
    - child_ids: Direct replies, derived by the repository from parent_id
    """

    id: ThreadId
    text: str = Field(min_length=3, max_length=10000)
    author_id: UserId
    community_id: Optional[CommunityId] = None
    parent_id: Optional[ThreadId] = None
    child_ids: list[ThreadId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_top_level(self) -> bool:
        """Whether this thread is a post rather than a reply."""
        return self.parent_id is None
