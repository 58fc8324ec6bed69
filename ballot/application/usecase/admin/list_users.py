"""List users use case (admin only)."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from ballot.domain.service import ProfileService
from ballot.domain.value import Role, UserId


class ListUsersRequest(BaseModel):
    """List users request."""

    user_id: str  # From authenticated user


class UserItem(BaseModel):
    """Active user as shown in the admin panel."""

    id: str
    email: str | None
    username: str | None
    display_name: str | None
    role: Role
    created_at: datetime


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserItem]


class ListUsersUseCase:
    """Use case for listing active users with their roles."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize list users use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """Execute list users flow.

        Raises:
            NotAuthorizedError: If the caller is not an admin
        """
        await self.profile_service.require_admin(UserId(UUID(request.user_id)))

        rows = await self.profile_service.list_active_users()
        return ListUsersResponse(
            users=[
                UserItem(
                    id=str(profile.user_id),
                    email=user.email if user else None,
                    username=str(profile.username) if profile.username else None,
                    display_name=profile.display_name,
                    role=profile.role,
                    created_at=profile.created_at,
                )
                for profile, user in rows
            ]
        )
