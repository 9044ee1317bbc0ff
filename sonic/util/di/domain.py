"""Domain layer DI providers."""

from dishka import Scope, provide

from sonic.config import AuthSettings
from sonic.domain.repository import (
    CampaignParticipationRepository,
    CommentRepository,
    LikeRepository,
    PostRepository,
    UserRepository,
)
from sonic.domain.service import (
    AuthService,
    CampaignService,
    CommentService,
    JWTService,
    LikeService,
    PostService,
    UserService,
)
from sonic.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(self, user_repository: UserRepository) -> AuthService:
        """Provide email/password authentication domain service."""
        return AuthService(user_repository=user_repository)

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service (stateless, shared by requests)."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_like_service(self, like_repository: LikeRepository) -> LikeService:
        """Provide like domain service."""
        return LikeService(like_repository=like_repository)

    @provide
    def get_campaign_service(
        self, participation_repository: CampaignParticipationRepository
    ) -> CampaignService:
        """Provide campaign participation domain service."""
        return CampaignService(participation_repository=participation_repository)
