"""Thread card response models and their assembly.

A thread card is what a feed shows for one thread: the text, the author
and community it belongs to, and the direct replies (whose authors'
images are shown next to the "N replies" label).
"""

from datetime import datetime

import logfire
from pydantic import BaseModel, computed_field

from threads.domain.model import Community, Thread, User
from threads.domain.service import CommunityService, ThreadService, UserService
from threads.domain.value import CommunityId, UserId


class AuthorSummary(BaseModel):
    """Author fields shown on a card."""

    id: str
    external_id: str
    username: str
    name: str
    image: str | None

    @classmethod
    def from_user(cls, user: User) -> "AuthorSummary":
        return cls(
            id=str(user.id),
            external_id=user.external_id.root,
            username=user.username.root,
            name=user.name,
            image=user.image,
        )


class CommunitySummary(BaseModel):
    """Community fields shown on a card."""

    id: str
    handle: str
    name: str
    image: str | None

    @classmethod
    def from_community(cls, community: Community) -> "CommunitySummary":
        return cls(
            id=str(community.id),
            handle=community.handle.root,
            name=community.name,
            image=community.image,
        )


class ReplySummary(BaseModel):
    """Direct reply shown under a card."""

    thread_id: str
    text: str
    author: AuthorSummary | None
    created_at: datetime


class ThreadCard(BaseModel):
    """Thread as shown in a feed."""

    thread_id: str
    text: str
    parent_id: str | None
    author: AuthorSummary | None
    community: CommunitySummary | None
    created_at: datetime
    replies: list[ReplySummary]

    @computed_field
    @property
    def reply_count(self) -> int:
        return len(self.replies)


class ThreadCardBuilder:
    """Populates threads with authors, communities and direct replies.

    Whatever the number of threads, this costs one query for the replies,
    one for the authors and one for the communities.
    """

    def __init__(
        self,
        thread_service: ThreadService,
        user_service: UserService,
        community_service: CommunityService,
    ) -> None:
        self.thread_service = thread_service
        self.user_service = user_service
        self.community_service = community_service

    async def build(self, threads: list[Thread]) -> list[ThreadCard]:
        """Build cards for threads, keeping their order."""
        if not threads:
            return []

        with logfire.span("thread_card_builder.build", count=len(threads)):
            children = await self.thread_service.get_children([t.id for t in threads])

            author_ids: list[UserId] = [t.author_id for t in threads]
            for replies in children.values():
                author_ids.extend(reply.author_id for reply in replies)
            authors = await self.user_service.get_users_by_ids(author_ids)

            community_ids: list[CommunityId] = [
                t.community_id for t in threads if t.community_id
            ]
            communities = await self.community_service.get_communities_by_ids(
                community_ids
            )

            return [
                self._card(thread, children.get(thread.id, []), authors, communities)
                for thread in threads
            ]

    @staticmethod
    def _card(
        thread: Thread,
        replies: list[Thread],
        authors: dict[UserId, User],
        communities: dict[CommunityId, Community],
    ) -> ThreadCard:
        author = authors.get(thread.author_id)
        community = communities.get(thread.community_id) if thread.community_id else None
        return ThreadCard(
            thread_id=str(thread.id),
            text=thread.text,
            parent_id=str(thread.parent_id) if thread.parent_id else None,
            author=AuthorSummary.from_user(author) if author else None,
            community=(
                CommunitySummary.from_community(community) if community else None
            ),
            created_at=thread.created_at,
            replies=[
                ReplySummary(
                    thread_id=str(reply.id),
                    text=reply.text,
                    author=(
                        AuthorSummary.from_user(authors[reply.author_id])
                        if reply.author_id in authors
                        else None
                    ),
                    created_at=reply.created_at,
                )
                for reply in replies
            ],
        )
