"""Unit tests for session token signing and verification."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from ballot.config import AuthSettings
from ballot.util.jwt import JWTError, create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="unit-test-secret")


def _sign(claims: dict, secret: str = "unit-test-secret") -> str:
    return jwt.encode(claims, secret, algorithm="HS256")


def test_round_trip_keeps_subject_and_email():
    user_id = str(uuid4())

    payload = verify_token(create_token(user_id, "ada@example.com", SETTINGS), SETTINGS)

    assert payload.user_id == user_id
    assert payload.email == "ada@example.com"
    assert payload.exp > datetime.now(timezone.utc)
    assert payload.iat is not None


def test_expired_token_is_rejected():
    expired = _sign(
        {"sub": str(uuid4()), "exp": datetime.now(timezone.utc) - timedelta(hours=1)}
    )

    with pytest.raises(JWTError, match="expired"):
        verify_token(expired, SETTINGS)


def test_token_within_clock_skew_is_accepted():
    """Tokens a few seconds past expiry still pass."""
    user_id = str(uuid4())
    token = _sign(
        {"sub": user_id, "exp": datetime.now(timezone.utc) - timedelta(seconds=5)}
    )

    assert verify_token(token, SETTINGS).user_id == user_id


def test_token_without_subject_is_rejected():
    token = _sign(
        {"email": "ada@example.com", "exp": datetime.now(timezone.utc) + timedelta(days=1)}
    )

    with pytest.raises(JWTError, match="Invalid token"):
        verify_token(token, SETTINGS)


def test_token_signed_with_another_secret_is_rejected():
    token = _sign(
        {"sub": str(uuid4()), "exp": datetime.now(timezone.utc) + timedelta(days=1)},
        secret="someone-else",
    )

    with pytest.raises(JWTError, match="Invalid token"):
        verify_token(token, SETTINGS)
