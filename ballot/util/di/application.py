"""Application layer DI providers."""

from dishka import Scope, provide

from ballot.application.usecase.admin import ListUsersUseCase, UpdateUserRoleUseCase
from ballot.application.usecase.auth import ClaimAdminUseCase, GetCurrentUserUseCase
from ballot.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
    VoteCommentUseCase,
)
from ballot.application.usecase.poll import (
    CastVoteUseCase,
    CreatePollUseCase,
    DeletePollUseCase,
    GetPollUseCase,
    ListPollsUseCase,
    UpdatePollUseCase,
)
from ballot.application.usecase.user import UpdateProfileUseCase
from ballot.domain.service import (
    AdminActionService,
    CommentService,
    JWTService,
    PollService,
    ProfileService,
    VoteService,
)
from ballot.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, profile_service: ProfileService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_claim_admin_use_case(
        self,
        profile_service: ProfileService,
        admin_action_service: AdminActionService,
    ) -> ClaimAdminUseCase:
        """Provide claim admin use case."""
        return ClaimAdminUseCase(
            profile_service=profile_service,
            admin_action_service=admin_action_service,
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, profile_service: ProfileService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(profile_service=profile_service)

    # Poll use cases
    @provide(scope=Scope.REQUEST)
    def get_list_polls_use_case(self, poll_service: PollService) -> ListPollsUseCase:
        """Provide list polls use case."""
        return ListPollsUseCase(poll_service=poll_service)

    @provide(scope=Scope.REQUEST)
    def get_get_poll_use_case(self, poll_service: PollService) -> GetPollUseCase:
        """Provide get poll use case."""
        return GetPollUseCase(poll_service=poll_service)

    @provide(scope=Scope.REQUEST)
    def get_create_poll_use_case(
        self, poll_service: PollService
    ) -> CreatePollUseCase:
        """Provide create poll use case."""
        return CreatePollUseCase(poll_service=poll_service)

    @provide(scope=Scope.REQUEST)
    def get_update_poll_use_case(
        self,
        poll_service: PollService,
        profile_service: ProfileService,
        admin_action_service: AdminActionService,
    ) -> UpdatePollUseCase:
        """Provide update poll use case."""
        return UpdatePollUseCase(
            poll_service=poll_service,
            profile_service=profile_service,
            admin_action_service=admin_action_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_poll_use_case(
        self,
        poll_service: PollService,
        profile_service: ProfileService,
        admin_action_service: AdminActionService,
    ) -> DeletePollUseCase:
        """Provide delete poll use case."""
        return DeletePollUseCase(
            poll_service=poll_service,
            profile_service=profile_service,
            admin_action_service=admin_action_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        profile_service: ProfileService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            vote_service=vote_service,
            profile_service=profile_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        profile_service: ProfileService,
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(
            comment_service=comment_service,
            vote_service=vote_service,
            profile_service=profile_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        profile_service: ProfileService,
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service,
            vote_service=vote_service,
            profile_service=profile_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        profile_service: ProfileService,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service,
            vote_service=vote_service,
            profile_service=profile_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        profile_service: ProfileService,
        admin_action_service: AdminActionService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            profile_service=profile_service,
            admin_action_service=admin_action_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_vote_comment_use_case(
        self, vote_service: VoteService
    ) -> VoteCommentUseCase:
        """Provide vote comment use case."""
        return VoteCommentUseCase(vote_service=vote_service)

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(
        self, profile_service: ProfileService
    ) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_role_use_case(
        self,
        profile_service: ProfileService,
        admin_action_service: AdminActionService,
    ) -> UpdateUserRoleUseCase:
        """Provide update user role use case."""
        return UpdateUserRoleUseCase(
            profile_service=profile_service,
            admin_action_service=admin_action_service,
        )
