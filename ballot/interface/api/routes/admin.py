"""Admin routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from ballot.application.usecase.admin import (
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    UpdateUserRoleRequest,
    UpdateUserRoleResponse,
    UpdateUserRoleUseCase,
)
from ballot.domain.error import DomainError
from ballot.domain.service import JWTService
from ballot.interface.api.credentials import get_auth_token, require_user_id
from ballot.interface.api.errors import to_http_exception

router = APIRouter(prefix="/api/admin", tags=["admin"], route_class=DishkaRoute)


class UpdateUserRoleAPIRequest(BaseModel):
    """API request for changing a user's role."""

    model_config = ConfigDict(populate_by_name=True)

    target_user_id: str | None = Field(default=None, alias="targetUserId")
    new_role: str | None = Field(default=None, alias="newRole")


@router.get("/users", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> ListUsersResponse:
    """List active users with their roles (admin only).

    Raises:
        HTTPException: 401 without a session, 403 for non-admins
    """
    user_id = require_user_id(jwt_service, auth_token, "manage users")

    try:
        return await list_users_use_case.execute(ListUsersRequest(user_id=user_id))
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/users", response_model=UpdateUserRoleResponse)
async def update_user_role(
    request: UpdateUserRoleAPIRequest,
    update_user_role_use_case: FromDishka[UpdateUserRoleUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> UpdateUserRoleResponse:
    """Change another user's role (admin only).

    Raises:
        HTTPException: 401, 403, 400 (missing fields or unknown role) or 404
    """
    user_id = require_user_id(jwt_service, auth_token, "manage users")

    try:
        return await update_user_role_use_case.execute(
            UpdateUserRoleRequest(
                user_id=user_id,
                target_user_id=request.target_user_id,
                new_role=request.new_role,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
