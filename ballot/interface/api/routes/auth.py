"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from ballot.application.usecase.auth import (
    ClaimAdminRequest,
    ClaimAdminResponse,
    ClaimAdminUseCase,
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from ballot.domain.error import DomainError
from ballot.domain.service import JWTService
from ballot.interface.api.credentials import get_auth_token, require_user_id
from ballot.interface.api.errors import to_http_exception
from ballot.util.jwt import JWTError

router = APIRouter(prefix="/api/auth", tags=["authentication"], route_class=DishkaRoute)


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Returned by /api/auth/me whether or not the caller is signed in.
    """

    authenticated: bool
    user: GetCurrentUserResponse | None = None


class ClaimAdminAPIRequest(BaseModel):
    """API request for claiming the admin role."""

    model_config = ConfigDict(populate_by_name=True)

    operator_token: str | None = Field(default=None, alias="operatorToken")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Depends(get_auth_token),
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    Safe to call without a credential: answers ``authenticated=false``
    instead of raising.

    Args:
        get_current_user_use_case: Get current user use case from DI
        auth_token: Session token from header or cookie (optional)

    Returns:
        Authentication status with user information if authenticated
    """
    if not auth_token:
        return AuthStatusResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
        return AuthStatusResponse(authenticated=True, user=user)
    except JWTError:
        # Invalid or expired token is an ordinary signed-out state
        return AuthStatusResponse(authenticated=False)


@router.post("/claim-admin", response_model=ClaimAdminResponse)
async def claim_admin(
    request: ClaimAdminAPIRequest,
    claim_admin_use_case: FromDishka[ClaimAdminUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> ClaimAdminResponse:
    """Promote the caller to admin using the operator secret.

    Args:
        request: Body carrying ``operatorToken``
        claim_admin_use_case: Claim admin use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: Session token from header or cookie

    Returns:
        Success flag and the new role

    Raises:
        HTTPException: 401 without a session, 403 when the claim is refused
    """
    user_id = require_user_id(jwt_service, auth_token, "claim admin")
    if not request.operator_token:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Operator token required",
        )

    try:
        return await claim_admin_use_case.execute(
            ClaimAdminRequest(user_id=user_id, operator_token=request.operator_token)
        )
    except DomainError as e:
        raise to_http_exception(e)
