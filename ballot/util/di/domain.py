"""Domain layer DI providers."""

from dishka import Scope, provide

from ballot.config import AuthSettings, PollSettings
from ballot.domain.repository import (
    AdminActionRepository,
    CommentRepository,
    CommentVoteRepository,
    PollRepository,
    ProfileRepository,
    UserRepository,
    VoteRepository,
)
from ballot.domain.service import (
    AdminActionService,
    CommentService,
    JWTService,
    PollService,
    ProfileService,
    VoteService,
)
from ballot.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with the repository/session
    lifecycle: each HTTP request gets fresh services sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_profile_service(
        self,
        profile_repository: ProfileRepository,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
    ) -> ProfileService:
        """Provide profile and role domain service."""
        return ProfileService(
            profile_repository=profile_repository,
            user_repository=user_repository,
            auth_settings=auth_settings,
        )

    @provide
    def get_poll_service(
        self,
        poll_repository: PollRepository,
        vote_repository: VoteRepository,
        poll_settings: PollSettings,
    ) -> PollService:
        """Provide poll domain service."""
        return PollService(
            poll_repository=poll_repository,
            vote_repository=vote_repository,
            poll_settings=poll_settings,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        poll_repository: PollRepository,
        poll_settings: PollSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            poll_repository=poll_repository,
            poll_settings=poll_settings,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        comment_vote_repository: CommentVoteRepository,
        poll_repository: PollRepository,
        poll_service: PollService,
        comment_service: CommentService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            comment_vote_repository=comment_vote_repository,
            poll_repository=poll_repository,
            poll_service=poll_service,
            comment_service=comment_service,
        )

    @provide
    def get_admin_action_service(
        self, admin_action_repository: AdminActionRepository
    ) -> AdminActionService:
        """Provide admin audit log domain service."""
        return AdminActionService(admin_action_repository=admin_action_repository)
