"""Mock persistence providers for testing."""

from dishka import Scope, provide

from threads.domain.repository import (
    CommunityRepository,
    ThreadRepository,
    UserRepository,
)
from threads.persistence.repository.inmemory import (
    InMemoryCommunityRepository,
    InMemoryStore,
    InMemoryThreadRepository,
    InMemoryUserRepository,
)
from threads.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store lives for the whole container, so data written in one request
    is visible to the next (e2e tests make several calls). Every container
    gets a fresh store, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self, store: InMemoryStore) -> ThreadRepository:
        """Provide in-memory thread repository."""
        return InMemoryThreadRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_community_repository(self, store: InMemoryStore) -> CommunityRepository:
        """Provide in-memory community repository."""
        return InMemoryCommunityRepository(store)
