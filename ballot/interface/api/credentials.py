"""Request credential helpers."""

from fastapi import Cookie, Header, HTTPException, status

from ballot.domain.service import JWTService

BEARER_PREFIX = "bearer "


def get_auth_token(
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> str | None:
    """Extract the session token from the request.

    A ``Authorization: Bearer`` header wins over the ``auth_token`` cookie.

    Args:
        authorization: Authorization header (optional)
        auth_token: JWT token from cookie (optional)

    Returns:
        Raw token, or None when the request carries no credential
    """
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
        if token:
            return token
    return auth_token or None


def require_user_id(jwt_service: JWTService, token: str | None, action: str) -> str:
    """Resolve the caller's user ID or fail with 401.

    Args:
        jwt_service: JWT service for token verification
        token: Raw token from ``get_auth_token``
        action: Human readable action, used in the error detail

    Returns:
        Authenticated user ID

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id
