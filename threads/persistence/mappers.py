"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM. Derived list fields (``thread_ids``,
``child_ids``, ``member_ids`` and so on) are passed in by the repositories,
which load them in batch queries, and are left out when saving.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from threads.domain.model import Community, Thread, User
from threads.domain.value import (
    CommunityId,
    ExternalId,
    ThreadId,
    UserId,
    Username,
)


def _uuid(value: Any) -> Optional[UUID]:
    """Coerce a database UUID value, which may arrive as a string."""
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_user(
    row: Dict[str, Any],
    thread_ids: Optional[list[UUID]] = None,
    community_ids: Optional[list[UUID]] = None,
) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict
        thread_ids: IDs of the user's top-level threads
        community_ids: IDs of communities the user belongs to

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        external_id=ExternalId(row["external_id"]),
        username=Username(row["username"]),
        name=row["name"],
        bio=row.get("bio"),
        image=row.get("image"),
        onboarded=row["onboarded"],
        thread_ids=[ThreadId(tid) for tid in thread_ids or []],
        community_ids=[CommunityId(cid) for cid in community_ids or []],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Derived fields are excluded.
    """
    return user.model_dump(exclude={"thread_ids", "community_ids"})


def row_to_thread(
    row: Dict[str, Any], child_ids: Optional[list[UUID]] = None
) -> Thread:
    """Convert database row to Thread domain model.

    Args:
        row: Database row as dict
        child_ids: IDs of the thread's direct replies, oldest first

    Returns:
        Thread domain model
    """
    community_id = _uuid(row.get("community_id"))
    parent_id = _uuid(row.get("parent_id"))
    return Thread(
        id=ThreadId(_uuid(row["id"])),
        text=row["text"],
        author_id=UserId(_uuid(row["author_id"])),
        community_id=CommunityId(community_id) if community_id else None,
        parent_id=ThreadId(parent_id) if parent_id else None,
        child_ids=[ThreadId(cid) for cid in child_ids or []],
        created_at=row["created_at"],
    )


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert Thread domain model to database dict.

    ``child_ids`` is excluded; replies point at their parent instead.
    """
    return thread.model_dump(exclude={"child_ids"})


def row_to_community(
    row: Dict[str, Any],
    member_ids: Optional[list[UUID]] = None,
    thread_ids: Optional[list[UUID]] = None,
) -> Community:
    """Convert database row to Community domain model.

    Args:
        row: Database row as dict
        member_ids: IDs of the community's members
        thread_ids: IDs of threads posted to the community

    Returns:
        Community domain model
    """
    return Community(
        id=CommunityId(_uuid(row["id"])),
        handle=Username(row["handle"]),
        name=row["name"],
        image=row.get("image"),
        bio=row.get("bio"),
        created_by=UserId(_uuid(row["created_by"])),
        member_ids=[UserId(uid) for uid in member_ids or []],
        thread_ids=[ThreadId(tid) for tid in thread_ids or []],
        created_at=row["created_at"],
    )


def community_to_dict(community: Community) -> Dict[str, Any]:
    """Convert Community domain model to database dict."""
    return community.model_dump(exclude={"member_ids", "thread_ids"})
