"""In-memory admin action repository for testing."""

from typing import List
from uuid import UUID

from ballot.domain.model.admin_action import AdminAction
from ballot.domain.repository.admin_action import AdminActionRepository


class InMemoryAdminActionRepository(AdminActionRepository):
    """In-memory implementation of AdminActionRepository for testing."""

    def __init__(self) -> None:
        self._actions: list[AdminAction] = []

    async def save(self, action: AdminAction) -> AdminAction:
        """Append an audit record."""
        self._actions.append(action)
        return action

    async def find_by_target(self, target_id: UUID) -> List[AdminAction]:
        """List audit records about one entity, newest first."""
        matching = [a for a in self._actions if a.target_id == target_id]
        return sorted(matching, key=lambda a: a.created_at, reverse=True)
