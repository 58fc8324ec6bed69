"""Delete poll use case."""

from uuid import UUID

from pydantic import BaseModel

from ballot.application.usecase.base import parse_uuid
from ballot.domain.error import NotFoundError
from ballot.domain.service import AdminActionService, PollService, ProfileService
from ballot.domain.value import AdminActionType, PollId, TargetType, UserId


class DeletePollRequest(BaseModel):
    """Delete poll request."""

    poll_id: str
    user_id: str  # From authenticated user


class DeletePollResponse(BaseModel):
    """Delete poll response."""

    success: bool


class DeletePollUseCase:
    """Use case for hard-deleting a poll (creator or admin)."""

    def __init__(
        self,
        poll_service: PollService,
        profile_service: ProfileService,
        admin_action_service: AdminActionService,
    ) -> None:
        """Initialize delete poll use case.

        Args:
            poll_service: Poll domain service
            profile_service: Profile service (role lookup)
            admin_action_service: Admin audit log service
        """
        self.poll_service = poll_service
        self.profile_service = profile_service
        self.admin_action_service = admin_action_service

    async def execute(self, request: DeletePollRequest) -> DeletePollResponse:
        """Execute delete poll flow.

        Raises:
            NotFoundError: If the poll doesn't exist
            NotAuthorizedError: If the caller is neither creator nor admin
        """
        poll_uuid = parse_uuid(request.poll_id)
        if not poll_uuid:
            raise NotFoundError("Poll", request.poll_id)

        user_id = UserId(UUID(request.user_id))
        role = await self.profile_service.get_role(user_id)

        deleted = await self.poll_service.delete_poll(PollId(poll_uuid), user_id, role)

        if deleted.user_id != user_id:
            await self.admin_action_service.log_action(
                admin_id=user_id,
                action_type=AdminActionType.DELETE_POLL,
                target_id=deleted.id,
                target_type=TargetType.POLL,
                details={
                    "poll_title": deleted.title,
                    "poll_owner": str(deleted.user_id) if deleted.user_id else None,
                },
            )

        return DeletePollResponse(success=True)
