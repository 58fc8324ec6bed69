"""Authentication use cases."""

from .claim_admin import ClaimAdminRequest, ClaimAdminResponse, ClaimAdminUseCase
from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)

__all__ = [
    "ClaimAdminRequest",
    "ClaimAdminResponse",
    "ClaimAdminUseCase",
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
]
