"""Update poll use case."""

from uuid import UUID

from pydantic import BaseModel

from ballot.application.usecase.base import parse_uuid
from ballot.domain.error import NotFoundError
from ballot.domain.service import AdminActionService, PollService, ProfileService
from ballot.domain.value import AdminActionType, PollId, TargetType, UserId

from .common import PollItem, PollResponse


class UpdatePollRequest(BaseModel):
    """Update poll request."""

    poll_id: str
    user_id: str  # From authenticated user
    title: str | None = None
    description: str | None = None
    is_active: bool | None = None


class UpdatePollUseCase:
    """Use case for editing a poll.

    The creator may edit their poll; admins may edit any poll, and an
    admin editing someone else's poll is recorded in the audit log.
    """

    def __init__(
        self,
        poll_service: PollService,
        profile_service: ProfileService,
        admin_action_service: AdminActionService,
    ) -> None:
        """Initialize update poll use case.

        Args:
            poll_service: Poll domain service
            profile_service: Profile service (role lookup)
            admin_action_service: Admin audit log service
        """
        self.poll_service = poll_service
        self.profile_service = profile_service
        self.admin_action_service = admin_action_service

    async def execute(self, request: UpdatePollRequest) -> PollResponse:
        """Execute update poll flow.

        Raises:
            NotFoundError: If the poll doesn't exist
            NotAuthorizedError: If the caller is neither creator nor admin
            InvalidInputError: If a field breaks the poll rules
        """
        poll_uuid = parse_uuid(request.poll_id)
        if not poll_uuid:
            raise NotFoundError("Poll", request.poll_id)

        user_id = UserId(UUID(request.user_id))
        role = await self.profile_service.get_role(user_id)

        before, after = await self.poll_service.update_poll(
            PollId(poll_uuid),
            user_id,
            role,
            title=request.title,
            description=request.description,
            is_active=request.is_active,
        )

        if before.user_id != user_id:
            await self.admin_action_service.log_action(
                admin_id=user_id,
                action_type=AdminActionType.UPDATE_POLL,
                target_id=before.id,
                target_type=TargetType.POLL,
                details={
                    "poll_title": before.title,
                    "changes": request.model_dump(
                        include={"title", "description", "is_active"},
                        exclude_none=True,
                    ),
                },
            )

        results = await self.poll_service.get_results(after)
        return PollResponse(poll=PollItem.from_results(results))
