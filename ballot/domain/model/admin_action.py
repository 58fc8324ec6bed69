"""Admin action audit record."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field

from ballot.domain.model.common import DomainModel
from ballot.domain.value import AdminActionId, AdminActionType, TargetType, UserId


class AdminAction(DomainModel):
    """Append-only record of a privileged mutation."""

    id: AdminActionId
    admin_id: UserId
    action_type: AdminActionType
    target_id: UUID
    target_type: TargetType
    action_details: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=datetime.now)
