"""PostgreSQL implementation of User repository."""

from collections import defaultdict
from typing import Optional
from uuid import UUID

import logfire
from sqlalchemy import asc, desc, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from threads.domain.model import User
from threads.domain.repository import UserRepository
from threads.domain.value import ExternalId, SortOrder, UserId, Username
from threads.persistence.mappers import row_to_user, user_to_dict
from threads.persistence.search import contains_pattern
from threads.persistence.tables import (
    community_members_table,
    threads_table,
    users_table,
)


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_derived(
        self, user_ids: list[UUID]
    ) -> tuple[dict[UUID, list[UUID]], dict[UUID, list[UUID]]]:
        """Fetch thread and community IDs for several users.

        Two queries regardless of how many users are given.

        Returns:
            (user_id -> top-level thread IDs newest first,
             user_id -> community IDs)
        """
        if not user_ids:
            return {}, {}

        thread_stmt = (
            select(threads_table.c.author_id, threads_table.c.id)
            .where(threads_table.c.author_id.in_(user_ids))
            .where(threads_table.c.parent_id.is_(None))
            .order_by(desc(threads_table.c.created_at))
        )
        thread_map: dict[UUID, list[UUID]] = defaultdict(list)
        for row in (await self.session.execute(thread_stmt)).fetchall():
            thread_map[row.author_id].append(row.id)

        member_stmt = (
            select(
                community_members_table.c.user_id,
                community_members_table.c.community_id,
            )
            .where(community_members_table.c.user_id.in_(user_ids))
            .order_by(asc(community_members_table.c.joined_at))
        )
        community_map: dict[UUID, list[UUID]] = defaultdict(list)
        for row in (await self.session.execute(member_stmt)).fetchall():
            community_map[row.user_id].append(row.community_id)

        return thread_map, community_map

    async def _to_users(self, rows) -> list[User]:
        """Map user rows to domain models with derived fields."""
        rows = [dict(row) for row in rows]
        thread_map, community_map = await self._fetch_derived(
            [row["id"] for row in rows]
        )
        return [
            row_to_user(
                row,
                thread_ids=thread_map.get(row["id"], []),
                community_ids=community_map.get(row["id"], []),
            )
            for row in rows
        ]

    async def _find_one(self, stmt) -> Optional[User]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        users = await self._to_users([row])
        return users[0]

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        return await self._find_one(stmt)

    async def find_by_external_id(self, external_id: ExternalId) -> Optional[User]:
        """Find a user by their identity provider id."""
        stmt = select(users_table).where(
            users_table.c.external_id == external_id.root
        )
        return await self._find_one(stmt)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        stmt = select(users_table).where(users_table.c.username == username.root)
        return await self._find_one(stmt)

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find several users in one query."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return await self._to_users(result.mappings().all())

    def _search_filter(self, stmt, exclude_id: UserId | None, query: str | None):
        """Apply the exclusion and text filters shared by search and count."""
        if exclude_id is not None:
            stmt = stmt.where(users_table.c.id != exclude_id)
        if query:
            pattern = contains_pattern(query)
            stmt = stmt.where(
                or_(
                    users_table.c.username.ilike(pattern, escape="\\"),
                    users_table.c.name.ilike(pattern, escape="\\"),
                )
            )
        return stmt

    async def search(
        self,
        exclude_id: UserId | None = None,
        query: str | None = None,
        sort: SortOrder = SortOrder.DESC,
        limit: int = 20,
        offset: int = 0,
    ) -> list[User]:
        """Search users by username or name."""
        with logfire.span(
            "user_repository.search",
            query=query,
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            stmt = self._search_filter(select(users_table), exclude_id, query)
            order = desc if sort == SortOrder.DESC else asc
            stmt = (
                stmt.order_by(order(users_table.c.created_at), order(users_table.c.id))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            users = await self._to_users(result.mappings().all())
            logfire.info("Found users", count=len(users))
            return users

    async def count_search(
        self, exclude_id: UserId | None = None, query: str | None = None
    ) -> int:
        """Count users matching a search."""
        stmt = self._search_filter(
            select(func.count()).select_from(users_table), exclude_id, query
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        with logfire.span("user_repository.save", user_id=str(user.id)):
            existing_stmt = select(users_table.c.id).where(users_table.c.id == user.id)
            exists = (await self.session.execute(existing_stmt)).first() is not None

            user_dict = user_to_dict(user)

            if exists:
                stmt = (
                    users_table.update()
                    .where(users_table.c.id == user.id)
                    .values(**user_dict)
                )
            else:
                logfire.info("Inserting new user", user_id=str(user.id))
                stmt = users_table.insert().values(**user_dict)
            await self.session.execute(stmt)

            await self.session.flush()
            return user
