"""Mock persistence providers for testing."""

from dishka import Scope, provide

from reel.domain.repository import (
    CommentRepository,
    ThreadRepository,
    UserRepository,
)
from reel.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryStore,
    InMemoryThreadRepository,
    InMemoryUserRepository,
)
from reel.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so data survives across requests served by one
    container; each test builds its own container, which keeps tests isolated.
    Repositories are REQUEST-scoped views over that store.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory tables."""
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
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)
