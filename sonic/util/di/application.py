"""Application layer DI providers."""

from dishka import Scope, provide

from sonic.application.usecase.admin import SeedAdminUseCase
from sonic.application.usecase.auth import LoginUseCase, RegisterUseCase
from sonic.application.usecase.campaign import (
    GetJoinStatusUseCase,
    JoinCampaignUseCase,
)
from sonic.application.usecase.comment import (
    AddCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
)
from sonic.application.usecase.like import GetLikeStatusUseCase, ToggleLikeUseCase
from sonic.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetFeedUseCase,
    GetPostUseCase,
    SetFeaturedUseCase,
    UpdatePostUseCase,
)
from sonic.application.usecase.user import (
    GetCurrentUserUseCase,
    GetUserProfileUseCase,
    UpdateUserProfileUseCase,
)
from sonic.config import AdminSeedSettings
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service, jwt_service=jwt_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self,
        post_service: PostService,
        like_service: LikeService,
        campaign_service: CampaignService,
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_service=post_service,
            like_service=like_service,
            campaign_service=campaign_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_feed_use_case(
        self,
        post_service: PostService,
        like_service: LikeService,
        campaign_service: CampaignService,
    ) -> GetFeedUseCase:
        """Provide feed use case."""
        return GetFeedUseCase(
            post_service=post_service,
            like_service=like_service,
            campaign_service=campaign_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self,
        post_service: PostService,
        like_service: LikeService,
        campaign_service: CampaignService,
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service,
            like_service=like_service,
            campaign_service=campaign_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_set_featured_use_case(
        self, post_service: PostService
    ) -> SetFeaturedUseCase:
        """Provide set featured use case."""
        return SetFeaturedUseCase(post_service=post_service)

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(
        self, post_service: PostService, like_service: LikeService
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(post_service=post_service, like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_get_like_status_use_case(
        self, post_service: PostService, like_service: LikeService
    ) -> GetLikeStatusUseCase:
        """Provide like status use case."""
        return GetLikeStatusUseCase(
            post_service=post_service, like_service=like_service
        )

    # Campaign use cases
    @provide(scope=Scope.REQUEST)
    def get_join_campaign_use_case(
        self, post_service: PostService, campaign_service: CampaignService
    ) -> JoinCampaignUseCase:
        """Provide join campaign use case."""
        return JoinCampaignUseCase(
            post_service=post_service, campaign_service=campaign_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_join_status_use_case(
        self, post_service: PostService, campaign_service: CampaignService
    ) -> GetJoinStatusUseCase:
        """Provide join status use case."""
        return GetJoinStatusUseCase(
            post_service=post_service, campaign_service=campaign_service
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide public profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_profile_use_case(
        self, user_service: UserService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(user_service=user_service)

    # Admin bootstrap
    @provide(scope=Scope.REQUEST)
    def get_seed_admin_use_case(
        self,
        auth_service: AuthService,
        user_service: UserService,
        settings: AdminSeedSettings,
    ) -> SeedAdminUseCase:
        """Provide admin seed use case."""
        return SeedAdminUseCase(
            auth_service=auth_service, user_service=user_service, settings=settings
        )
