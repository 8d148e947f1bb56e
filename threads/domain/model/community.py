"""Community aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from threads.domain.model.common import DomainModel
from threads.domain.value import CommunityId, ThreadId, UserId, Username


class Community(DomainModel):
    """Community aggregate root.

    A named group that users join and threads are posted to.
    Only the creator may edit or delete the community.

    ``member_ids`` and ``thread_ids`` are derived by the repository.
    """

    id: CommunityId
    handle: Username
    name: str = Field(min_length=1, max_length=50)
    image: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=1000)
    created_by: UserId
    member_ids: list[UserId] = Field(default_factory=list)
    thread_ids: list[ThreadId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
