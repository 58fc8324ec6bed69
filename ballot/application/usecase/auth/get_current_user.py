"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from ballot.domain.service import JWTService, ProfileService
from ballot.domain.value import Role, UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    id: str
    email: str
    username: str | None
    display_name: str | None
    role: Role
    created_at: datetime


class GetCurrentUserUseCase:
    """Use case for resolving the signed-in user.

    The first call for a user mirrors their identity and creates a
    default profile.
    """

    def __init__(
        self, jwt_service: JWTService, profile_service: ProfileService
    ) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            profile_service: Profile domain service
        """
        self.jwt_service = jwt_service
        self.profile_service = profile_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Upsert the identity record from the token claims
        3. Ensure a profile exists
        4. Return identity, profile and role

        Args:
            request: Request with JWT token

        Returns:
            User information

        Raises:
            JWTError: If token is invalid or expired
        """
        payload = self.jwt_service.verify_token(request.token)
        user_id = UserId(UUID(payload.user_id))

        user = await self.profile_service.sync_identity(user_id, payload.email)
        profile = await self.profile_service.ensure_profile(user_id)

        return GetCurrentUserResponse(
            id=str(user.id),
            email=user.email,
            username=str(profile.username) if profile.username else None,
            display_name=profile.display_name,
            role=profile.effective_role,
            created_at=profile.created_at,
        )
