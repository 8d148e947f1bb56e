"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from threads.domain.error import BusinessRuleViolationError, NotFoundError
from threads.domain.model import User
from threads.domain.repository import UserRepository
from threads.domain.value import ExternalId, Page, SortOrder, UserId, Username

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_external_id(self, external_id: ExternalId) -> User | None:
        """Get user by identity provider id.

        Args:
            external_id: External user id

        Returns:
            User if found, None otherwise
        """
        with logfire.span(
            "user_service.get_by_external_id", external_id=external_id.root
        ):
            user = await self.user_repository.find_by_external_id(external_id)
            if user:
                logfire.info(
                    "User found", external_id=external_id.root, user_id=str(user.id)
                )
            else:
                logfire.warn("User not found", external_id=external_id.root)
            return user

    async def require_by_external_id(self, external_id: ExternalId) -> User:
        """Get user by identity provider id, raising if absent.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.get_by_external_id(external_id)
        if not user:
            raise NotFoundError("User", external_id.root)
        return user

    async def get_users_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Load several users at once.

        Args:
            user_ids: User IDs (duplicates allowed)

        Returns:
            Mapping of user ID to user for the users that exist
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        users = await self.user_repository.find_by_ids(unique_ids)
        return {user.id: user for user in users}

    async def upsert_profile(
        self,
        external_id: ExternalId,
        username: Username,
        name: str,
        bio: str | None,
        image: str | None,
    ) -> User:
        """Create or update the profile keyed by external id.

        The user is marked as onboarded either way.

        Args:
            external_id: Identity provider id (upsert key)
            username: Username (normalized to lowercase)
            name: Display name
            bio: Profile bio
            image: Profile image URL

        Returns:
            Saved user

        Raises:
            BusinessRuleViolationError: If the username belongs to another user
        """
        with logfire.span(
            "user_service.upsert_profile",
            external_id=external_id.root,
            username=username.root,
        ):
            existing = await self.user_repository.find_by_external_id(external_id)

            owner = await self.user_repository.find_by_username(username)
            if owner and (existing is None or owner.id != existing.id):
                logfire.warn("Username already taken", username=username.root)
                raise BusinessRuleViolationError(
                    f"Username already taken: {username.root}"
                )

            now = datetime.now()
            if existing:
                user = existing.model_copy(
                    update={
                        "username": username,
                        "name": name,
                        "bio": bio,
                        "image": image,
                        "onboarded": True,
                        "updated_at": now,
                    }
                )
            else:
                user = User(
                    id=UserId(uuid4()),
                    external_id=external_id,
                    username=username,
                    name=name,
                    bio=bio,
                    image=image,
                    onboarded=True,
                    created_at=now,
                    updated_at=now,
                )

            saved = await self.user_repository.save(user)
            logfire.info(
                "User profile saved",
                user_id=str(saved.id),
                username=saved.username.root,
                created=existing is None,
            )
            return saved

    async def search_users(
        self,
        exclude_id: UserId | None,
        query: str | None,
        page: Page,
        sort: SortOrder = SortOrder.DESC,
    ) -> tuple[list[User], bool]:
        """Search users by username or name.

        Blank queries match every user.

        Args:
            exclude_id: User to leave out of the results
            query: Search text
            page: Page to return
            sort: Creation-time order

        Returns:
            Users on the page and whether a next page exists
        """
        query = query.strip() if query else None
        with logfire.span(
            "user_service.search_users",
            query=query,
            page=page.number,
            size=page.size,
            sort=sort.value,
        ):
            users = await self.user_repository.search(
                exclude_id=exclude_id,
                query=query or None,
                sort=sort,
                limit=page.size,
                offset=page.skip,
            )
            total = await self.user_repository.count_search(
                exclude_id=exclude_id, query=query or None
            )
            is_next = page.has_next(total, len(users))
            logfire.info("Users searched", count=len(users), total=total)
            return users, is_next
