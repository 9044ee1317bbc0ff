"""Mock persistence providers for testing."""

from dishka import Scope, provide

from sonic.domain.repository import (
    CampaignParticipationRepository,
    CommentRepository,
    LikeRepository,
    PostRepository,
    UserRepository,
)
from sonic.persistence.health import DatabaseHealthCheck, InMemoryHealthCheck
from sonic.persistence.repository.inmemory import (
    InMemoryCampaignParticipationRepository,
    InMemoryCommentRepository,
    InMemoryLikeRepository,
    InMemoryPostRepository,
    InMemoryUserRepository,
)
from sonic.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so data survives across the requests served by one
    container (needed by the HTTP tests). Each test builds its own
    container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_like_repository(self) -> LikeRepository:
        """Provide in-memory like repository."""
        return InMemoryLikeRepository()

    @provide(scope=Scope.APP)
    def get_participation_repository(self) -> CampaignParticipationRepository:
        """Provide in-memory campaign participation repository."""
        return InMemoryCampaignParticipationRepository()

    @provide(scope=Scope.APP)
    def get_health_check(self) -> DatabaseHealthCheck:
        """Provide a health check that always passes."""
        return InMemoryHealthCheck()
