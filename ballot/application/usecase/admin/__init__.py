"""Admin use cases."""

from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase, UserItem
from .update_user_role import (
    UpdateUserRoleRequest,
    UpdateUserRoleResponse,
    UpdateUserRoleUseCase,
)

__all__ = [
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "UpdateUserRoleRequest",
    "UpdateUserRoleResponse",
    "UpdateUserRoleUseCase",
    "UserItem",
]
