"""Claim admin use case."""

from uuid import UUID

from pydantic import BaseModel

from ballot.domain.service import AdminActionService, ProfileService
from ballot.domain.value import AdminActionType, Role, TargetType, UserId


class ClaimAdminRequest(BaseModel):
    """Claim admin request."""

    user_id: str  # From authenticated user
    operator_token: str


class ClaimAdminResponse(BaseModel):
    """Claim admin response."""

    success: bool
    role: Role


class ClaimAdminUseCase:
    """Use case for promoting the caller to admin with the operator secret."""

    def __init__(
        self,
        profile_service: ProfileService,
        admin_action_service: AdminActionService,
    ) -> None:
        """Initialize claim admin use case.

        Args:
            profile_service: Profile domain service
            admin_action_service: Admin audit log service
        """
        self.profile_service = profile_service
        self.admin_action_service = admin_action_service

    async def execute(self, request: ClaimAdminRequest) -> ClaimAdminResponse:
        """Execute claim admin flow.

        Args:
            request: Caller and the operator secret they supplied

        Returns:
            Success flag and the caller's new role

        Raises:
            NotAuthorizedError: If the claim is disabled or the secret is wrong
        """
        user_id = UserId(UUID(request.user_id))

        profile = await self.profile_service.claim_admin(
            user_id, request.operator_token
        )
        await self.admin_action_service.log_action(
            admin_id=user_id,
            action_type=AdminActionType.CLAIM_ADMIN,
            target_id=user_id,
            target_type=TargetType.USER,
            details={"new_role": profile.role.value},
        )

        return ClaimAdminResponse(success=True, role=profile.role)
