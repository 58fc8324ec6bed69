"""Update own profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from ballot.domain.service import ProfileService
from ballot.domain.value import Role, UserId


class UpdateProfileRequest(BaseModel):
    """Update profile request."""

    user_id: str  # From authenticated user
    username: str | None = None
    display_name: str | None = None


class UpdateProfileResponse(BaseModel):
    """Update profile response."""

    user_id: str
    username: str | None
    display_name: str | None
    role: Role
    updated_at: datetime


class UpdateProfileUseCase:
    """Use case for updating the caller's username and display name.

    Roles cannot be changed through this use case.
    """

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize update profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: UpdateProfileRequest) -> UpdateProfileResponse:
        """Execute update profile flow.

        Args:
            request: Caller and the fields to change

        Returns:
            Updated profile

        Raises:
            InvalidInputError: If a value is malformed or the username is taken
        """
        profile = await self.profile_service.update_profile(
            UserId(UUID(request.user_id)),
            username=request.username,
            display_name=request.display_name,
        )

        return UpdateProfileResponse(
            user_id=str(profile.user_id),
            username=str(profile.username) if profile.username else None,
            display_name=profile.display_name,
            role=profile.effective_role,
            updated_at=profile.updated_at,
        )
