"""Update user role use case (admin only)."""

from uuid import UUID

from pydantic import BaseModel

from ballot.application.usecase.base import parse_uuid
from ballot.domain.error import InvalidInputError
from ballot.domain.service import AdminActionService, ProfileService
from ballot.domain.value import AdminActionType, Role, TargetType, UserId


class UpdateUserRoleRequest(BaseModel):
    """Update user role request."""

    user_id: str  # From authenticated user
    target_user_id: str | None = None
    new_role: str | None = None


class UpdateUserRoleResponse(BaseModel):
    """Update user role response."""

    success: bool
    message: str


class UpdateUserRoleUseCase:
    """Use case for an admin changing another user's role."""

    def __init__(
        self,
        profile_service: ProfileService,
        admin_action_service: AdminActionService,
    ) -> None:
        """Initialize update user role use case.

        Args:
            profile_service: Profile domain service
            admin_action_service: Admin audit log service
        """
        self.profile_service = profile_service
        self.admin_action_service = admin_action_service

    async def execute(self, request: UpdateUserRoleRequest) -> UpdateUserRoleResponse:
        """Execute update user role flow.

        Args:
            request: Caller, target user and the new role

        Returns:
            Success flag and message

        Raises:
            NotAuthorizedError: If the caller is not an admin
            InvalidInputError: If fields are missing or the role is unknown
            NotFoundError: If the target user has no profile
        """
        admin_id = UserId(UUID(request.user_id))
        await self.profile_service.require_admin(admin_id)

        if not request.target_user_id or not request.new_role:
            raise InvalidInputError("Missing targetUserId or newRole")

        target_uuid = parse_uuid(request.target_user_id)
        if not target_uuid:
            raise InvalidInputError(f"Invalid targetUserId: {request.target_user_id}")

        try:
            new_role = Role(request.new_role)
        except ValueError:
            raise InvalidInputError(
                "Invalid role. Must be one of: user, moderator, admin"
            )

        target_id = UserId(target_uuid)
        previous_role = await self.profile_service.get_role(target_id)
        profile = await self.profile_service.set_role(target_id, new_role)

        await self.admin_action_service.log_action(
            admin_id=admin_id,
            action_type=AdminActionType.UPDATE_USER_ROLE,
            target_id=target_id,
            target_type=TargetType.USER,
            details={
                "previous_role": previous_role.value,
                "new_role": profile.role.value,
            },
        )

        return UpdateUserRoleResponse(
            success=True, message=f"User role updated to {profile.role.value}"
        )
