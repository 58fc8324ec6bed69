"""Admin action audit service."""

from typing import Any
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import SQLAlchemyError

from ballot.domain.model.admin_action import AdminAction
from ballot.domain.repository import AdminActionRepository
from ballot.domain.value import AdminActionId, AdminActionType, TargetType, UserId

from .base import Service


class AdminActionService(Service):
    """Best-effort audit logging of privileged mutations."""

    def __init__(self, admin_action_repository: AdminActionRepository) -> None:
        """Initialize admin action service.

        Args:
            admin_action_repository: Admin action repository
        """
        self.admin_action_repository = admin_action_repository

    async def log_action(
        self,
        admin_id: UserId,
        action_type: AdminActionType,
        target_id: UUID,
        target_type: TargetType,
        details: dict[str, Any] | None = None,
    ) -> AdminAction | None:
        """Append an audit record.

        A failed insert never fails the action being audited.

        Args:
            admin_id: User who performed the action
            action_type: What was done
            target_id: Entity the action applied to
            target_type: Kind of entity
            details: Extra structured context

        Returns:
            The stored record, or None if it could not be written
        """
        with logfire.span(
            "admin_action_service.log_action",
            admin_id=str(admin_id),
            action_type=action_type.value,
            target_id=str(target_id),
        ):
            action = AdminAction(
                id=AdminActionId(uuid4()),
                admin_id=admin_id,
                action_type=action_type,
                target_id=target_id,
                target_type=target_type,
                action_details=details or {},
            )
            try:
                saved = await self.admin_action_repository.save(action)
            except SQLAlchemyError as e:
                logfire.warn(
                    "Failed to write admin action",
                    admin_id=str(admin_id),
                    action_type=action_type.value,
                    target_id=str(target_id),
                    error=str(e),
                )
                return None

            logfire.info(
                "Admin action logged",
                admin_id=str(admin_id),
                action_type=action_type.value,
                target_type=target_type.value,
                target_id=str(target_id),
            )
            return saved
