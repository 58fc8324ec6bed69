"""Admin action repository interface."""

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from ballot.domain.model.admin_action import AdminAction


class AdminActionRepository(ABC):
    """Append-only repository for the admin audit log."""

    @abstractmethod
    async def save(self, action: AdminAction) -> AdminAction:
        """Append an audit record.

        Implementations must isolate the insert so that a failure leaves
        the surrounding transaction usable.

        Args:
            action: The record to append

        Returns:
            The stored record
        """
        pass

    @abstractmethod
    async def find_by_target(self, target_id: UUID) -> List[AdminAction]:
        """List audit records about one entity, newest first.

        No route reads the audit log; tests use this to check what was
        recorded.

        Args:
            target_id: ID of the user, poll or comment

        Returns:
            Matching audit records
        """
        pass
