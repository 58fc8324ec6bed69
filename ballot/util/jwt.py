"""Session token signing and verification.

Session tokens are HS256 JWTs shared with the identity provider. The
subject (``sub``) is the user ID; ``email`` is copied into the identity
mirror on ``/api/auth/me``.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, Field

from ballot.config import AuthSettings

REQUIRED_CLAIMS = ["sub", "exp"]

# Tolerated clock skew between the identity provider and this service
LEEWAY = timedelta(seconds=30)


class TokenPayload(BaseModel):
    """Verified session token claims."""

    user_id: str = Field(alias="sub")
    email: str = ""
    exp: datetime
    iat: datetime | None = None


class JWTError(Exception):
    """Missing, malformed or expired session token."""


def create_token(user_id: str, email: str, settings: AuthSettings) -> str:
    """Sign a session token for a user.

    Args:
        user_id: User ID, stored as the ``sub`` claim
        email: User email
        settings: Authentication settings

    Returns:
        Encoded JWT
    """
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "email": email,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check a session token's signature and expiry.

    Raises:
        JWTError: If the token is expired, badly signed or lacks a subject
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            leeway=LEEWAY,
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload.model_validate(claims)
    except ValueError:
        raise JWTError("Invalid token claims")
