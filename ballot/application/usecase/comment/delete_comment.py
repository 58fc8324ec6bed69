"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from ballot.application.usecase.base import parse_uuid
from ballot.domain.error import NotFoundError
from ballot.domain.service import AdminActionService, CommentService, ProfileService
from ballot.domain.value import AdminActionType, CommentId, TargetType, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str  # From authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment.

    Authors delete their own comments; moderators and admins may delete
    any comment, which is recorded in the audit log.
    """

    def __init__(
        self,
        comment_service: CommentService,
        profile_service: ProfileService,
        admin_action_service: AdminActionService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            profile_service: Profile service (role lookup)
            admin_action_service: Admin audit log service
        """
        self.comment_service = comment_service
        self.profile_service = profile_service
        self.admin_action_service = admin_action_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist or is already deleted
            NotAuthorizedError: If the caller is neither author nor elevated
        """
        comment_uuid = parse_uuid(request.comment_id)
        if not comment_uuid:
            raise NotFoundError("Comment", request.comment_id)

        user_id = UserId(UUID(request.user_id))
        role = await self.profile_service.get_role(user_id)

        comment = await self.comment_service.delete_comment(
            CommentId(comment_uuid), user_id, role
        )

        if comment.user_id != user_id:
            await self.admin_action_service.log_action(
                admin_id=user_id,
                action_type=AdminActionType.DELETE_COMMENT,
                target_id=comment.id,
                target_type=TargetType.COMMENT,
                details={
                    "comment_author": str(comment.user_id),
                    "poll_id": str(comment.poll_id) if comment.poll_id else None,
                    "role": role.value,
                },
            )

        return DeleteCommentResponse(success=True)
