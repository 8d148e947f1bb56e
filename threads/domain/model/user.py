"""User aggregate root.

Users sign in through an external identity provider and complete an
onboarding step that sets their public profile.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from threads.domain.model.common import DomainModel
from threads.domain.value import CommunityId, ExternalId, ThreadId, UserId, Username


class User(DomainModel):
    """User aggregate root.

    ``external_id`` is the identity provider's id and is the upsert key for
    profile updates. ``thread_ids`` (top-level threads authored) and
    ``community_ids`` (memberships) are derived by the repository and are
    never written back.
    """

    id: UserId
    external_id: ExternalId
    username: Username
    name: str = Field(min_length=1, max_length=30)
    bio: Optional[str] = Field(default=None, max_length=1000)
    image: Optional[str] = None
    onboarded: bool = False
    thread_ids: list[ThreadId] = Field(default_factory=list)
    community_ids: list[CommunityId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
