"""PostgreSQL implementation of Community repository."""

from collections import defaultdict
from typing import Optional
from uuid import UUID

import logfire
from sqlalchemy import asc, delete, desc, func, insert, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from threads.domain.model import Community
from threads.domain.repository import CommunityRepository
from threads.domain.value import CommunityId, SortOrder, UserId, Username
from threads.persistence.mappers import community_to_dict, row_to_community
from threads.persistence.search import contains_pattern
from threads.persistence.tables import (
    communities_table,
    community_members_table,
    threads_table,
)


class PostgresCommunityRepository(CommunityRepository):
    """PostgreSQL implementation of CommunityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_derived(
        self, community_ids: list[UUID]
    ) -> tuple[dict[UUID, list[UUID]], dict[UUID, list[UUID]]]:
        """Fetch member and thread IDs for several communities.

        Returns:
            (community_id -> member IDs in join order,
             community_id -> thread IDs newest first)
        """
        if not community_ids:
            return {}, {}

        member_stmt = (
            select(
                community_members_table.c.community_id,
                community_members_table.c.user_id,
            )
            .where(community_members_table.c.community_id.in_(community_ids))
            .order_by(asc(community_members_table.c.joined_at))
        )
        member_map: dict[UUID, list[UUID]] = defaultdict(list)
        for row in (await self.session.execute(member_stmt)).fetchall():
            member_map[row.community_id].append(row.user_id)

        thread_stmt = (
            select(threads_table.c.community_id, threads_table.c.id)
            .where(threads_table.c.community_id.in_(community_ids))
            .order_by(desc(threads_table.c.created_at))
        )
        thread_map: dict[UUID, list[UUID]] = defaultdict(list)
        for row in (await self.session.execute(thread_stmt)).fetchall():
            thread_map[row.community_id].append(row.id)

        return member_map, thread_map

    async def _to_communities(self, rows) -> list[Community]:
        rows = [dict(row) for row in rows]
        if not rows:
            return []
        member_map, thread_map = await self._fetch_derived([row["id"] for row in rows])
        return [
            row_to_community(
                row,
                member_ids=member_map.get(row["id"], []),
                thread_ids=thread_map.get(row["id"], []),
            )
            for row in rows
        ]

    async def _find_one(self, stmt) -> Optional[Community]:
        result = await self.session.execute(stmt)
        communities = await self._to_communities(result.mappings().all())
        return communities[0] if communities else None

    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID."""
        stmt = select(communities_table).where(communities_table.c.id == community_id)
        return await self._find_one(stmt)

    async def find_by_handle(self, handle: Username) -> Optional[Community]:
        """Find a community by handle."""
        stmt = select(communities_table).where(
            communities_table.c.handle == handle.root
        )
        return await self._find_one(stmt)

    async def find_by_ids(self, community_ids: list[CommunityId]) -> list[Community]:
        """Find several communities in one query."""
        if not community_ids:
            return []
        stmt = select(communities_table).where(
            communities_table.c.id.in_(community_ids)
        )
        result = await self.session.execute(stmt)
        return await self._to_communities(result.mappings().all())

    def _search_filter(self, stmt, query: str | None):
        if query:
            pattern = contains_pattern(query)
            stmt = stmt.where(
                or_(
                    communities_table.c.handle.ilike(pattern, escape="\\"),
                    communities_table.c.name.ilike(pattern, escape="\\"),
                )
            )
        return stmt

    async def search(
        self,
        query: str | None = None,
        sort: SortOrder = SortOrder.DESC,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Community]:
        """Search communities by handle or name."""
        with logfire.span(
            "community_repository.search",
            query=query,
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            order = desc if sort == SortOrder.DESC else asc
            stmt = (
                self._search_filter(select(communities_table), query)
                .order_by(
                    order(communities_table.c.created_at),
                    order(communities_table.c.id),
                )
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            communities = await self._to_communities(result.mappings().all())
            logfire.info("Found communities", count=len(communities))
            return communities

    async def count_search(self, query: str | None = None) -> int:
        """Count communities matching a search."""
        stmt = self._search_filter(
            select(func.count()).select_from(communities_table), query
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, community: Community) -> Community:
        """Save a community (create or update)."""
        with logfire.span(
            "community_repository.save", community_id=str(community.id)
        ):
            existing_stmt = select(communities_table.c.id).where(
                communities_table.c.id == community.id
            )
            exists = (await self.session.execute(existing_stmt)).first() is not None

            community_dict = community_to_dict(community)

            if exists:
                stmt = (
                    communities_table.update()
                    .where(communities_table.c.id == community.id)
                    .values(**community_dict)
                )
            else:
                logfire.info("Inserting new community", community_id=str(community.id))
                stmt = communities_table.insert().values(**community_dict)
            await self.session.execute(stmt)

            await self.session.flush()
            return community

    async def delete(self, community_id: CommunityId) -> None:
        """Delete a community and its memberships."""
        await self.session.execute(
            delete(community_members_table).where(
                community_members_table.c.community_id == community_id
            )
        )
        await self.session.execute(
            delete(communities_table).where(communities_table.c.id == community_id)
        )
        await self.session.flush()

    async def add_member(self, community_id: CommunityId, user_id: UserId) -> None:
        """Add a user to a community's members."""
        stmt = insert(community_members_table).values(
            community_id=community_id, user_id=user_id
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def remove_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Remove a user from a community's members."""
        stmt = delete(community_members_table).where(
            community_members_table.c.community_id == community_id,
            community_members_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return (result.rowcount or 0) > 0
