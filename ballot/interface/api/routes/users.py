"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from ballot.application.usecase.user import (
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from ballot.domain.error import DomainError
from ballot.domain.service import JWTService
from ballot.interface.api.credentials import get_auth_token, require_user_id
from ballot.interface.api.errors import to_http_exception

router = APIRouter(prefix="/api/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the caller's profile."""

    model_config = ConfigDict(populate_by_name=True)

    username: str | None = None
    display_name: str | None = Field(default=None, alias="displayName")


@router.patch("/me", response_model=UpdateProfileResponse)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> UpdateProfileResponse:
    """Update the caller's username and/or display name.

    Raises:
        HTTPException: 401 without a session, 400 on invalid or taken username
    """
    user_id = require_user_id(jwt_service, auth_token, "update your profile")

    try:
        return await update_profile_use_case.execute(
            UpdateProfileRequest(
                user_id=user_id,
                username=request.username,
                display_name=request.display_name,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
