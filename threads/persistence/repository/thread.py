"""PostgreSQL implementation of Thread repository."""

from collections import defaultdict
from typing import Optional
from uuid import UUID

import logfire
from sqlalchemy import asc, delete, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from threads.domain.model import Thread
from threads.domain.repository import ThreadRepository
from threads.domain.value import CommunityId, ThreadId, UserId
from threads.persistence.mappers import row_to_thread, thread_to_dict
from threads.persistence.tables import threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_child_ids(
        self, thread_ids: list[UUID]
    ) -> dict[UUID, list[UUID]]:
        """Fetch reply IDs for multiple threads in a single query.

        Args:
            thread_ids: List of thread IDs

        Returns:
            Dict mapping thread_id -> reply IDs, oldest first
        """
        if not thread_ids:
            return {}

        stmt = (
            select(threads_table.c.parent_id, threads_table.c.id)
            .where(threads_table.c.parent_id.in_(thread_ids))
            .order_by(asc(threads_table.c.created_at), asc(threads_table.c.id))
        )
        result = await self.session.execute(stmt)

        child_map: dict[UUID, list[UUID]] = defaultdict(list)
        for row in result.fetchall():
            child_map[row.parent_id].append(row.id)
        return child_map

    async def _to_threads(self, rows) -> list[Thread]:
        """Map thread rows to domain models with child IDs."""
        rows = [dict(row) for row in rows]
        if not rows:
            return []
        child_map = await self._fetch_child_ids([row["id"] for row in rows])
        return [
            row_to_thread(row, child_ids=child_map.get(row["id"], []))
            for row in rows
        ]

    async def _execute_threads(self, stmt) -> list[Thread]:
        result = await self.session.execute(stmt)
        return await self._to_threads(result.mappings().all())

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        with logfire.span("thread_repository.find_by_id", thread_id=str(thread_id)):
            stmt = select(threads_table).where(threads_table.c.id == thread_id)
            threads = await self._execute_threads(stmt)
            if not threads:
                logfire.warn("Thread not found", thread_id=str(thread_id))
                return None
            return threads[0]

    async def find_top_level(self, limit: int = 20, offset: int = 0) -> list[Thread]:
        """Find top-level threads, newest first."""
        with logfire.span(
            "thread_repository.find_top_level", limit=limit, offset=offset
        ):
            stmt = (
                select(threads_table)
                .where(threads_table.c.parent_id.is_(None))
                .order_by(desc(threads_table.c.created_at), desc(threads_table.c.id))
                .limit(limit)
                .offset(offset)
            )
            threads = await self._execute_threads(stmt)
            logfire.info("Found threads", count=len(threads))
            return threads

    async def count_top_level(self) -> int:
        """Count top-level threads."""
        stmt = (
            select(func.count())
            .select_from(threads_table)
            .where(threads_table.c.parent_id.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_children(self, parent_ids: list[ThreadId]) -> list[Thread]:
        """Find direct replies of any of the given threads, oldest first."""
        if not parent_ids:
            return []
        with logfire.span(
            "thread_repository.find_children", parent_count=len(parent_ids)
        ):
            stmt = (
                select(threads_table)
                .where(threads_table.c.parent_id.in_(parent_ids))
                .order_by(asc(threads_table.c.created_at), asc(threads_table.c.id))
            )
            return await self._execute_threads(stmt)

    async def find_by_author(
        self, author_id: UserId, top_level_only: bool = True
    ) -> list[Thread]:
        """Find threads written by a user, newest first."""
        stmt = select(threads_table).where(threads_table.c.author_id == author_id)
        if top_level_only:
            stmt = stmt.where(threads_table.c.parent_id.is_(None))
        stmt = stmt.order_by(desc(threads_table.c.created_at))
        return await self._execute_threads(stmt)

    async def find_by_community(self, community_id: CommunityId) -> list[Thread]:
        """Find threads posted to a community, newest first."""
        stmt = (
            select(threads_table)
            .where(threads_table.c.community_id == community_id)
            .order_by(desc(threads_table.c.created_at))
        )
        return await self._execute_threads(stmt)

    async def find_replies_to_author(self, author_id: UserId) -> list[Thread]:
        """Find replies by other users to any thread the user wrote."""
        with logfire.span(
            "thread_repository.find_replies_to_author", author_id=str(author_id)
        ):
            parent = threads_table.alias("parent")
            stmt = (
                select(threads_table)
                .join(parent, threads_table.c.parent_id == parent.c.id)
                .where(parent.c.author_id == author_id)
                .where(threads_table.c.author_id != author_id)
                .order_by(desc(threads_table.c.created_at))
            )
            return await self._execute_threads(stmt)

    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update)."""
        with logfire.span("thread_repository.save", thread_id=str(thread.id)):
            existing_stmt = select(threads_table.c.id).where(
                threads_table.c.id == thread.id
            )
            exists = (await self.session.execute(existing_stmt)).first() is not None

            thread_dict = thread_to_dict(thread)  # Note: child_ids excluded by mapper

            if exists:
                stmt = (
                    threads_table.update()
                    .where(threads_table.c.id == thread.id)
                    .values(**thread_dict)
                )
            else:
                logfire.info(
                    "Inserting new thread",
                    thread_id=str(thread.id),
                    parent_id=str(thread.parent_id) if thread.parent_id else None,
                )
                stmt = threads_table.insert().values(**thread_dict)
            await self.session.execute(stmt)

            await self.session.flush()
            return thread

    async def delete_many(self, thread_ids: list[ThreadId]) -> int:
        """Delete threads (hard delete)."""
        if not thread_ids:
            return 0
        with logfire.span("thread_repository.delete_many", count=len(thread_ids)):
            stmt = delete(threads_table).where(threads_table.c.id.in_(thread_ids))
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount or 0
