"""PostgreSQL implementation of AdminAction repository."""

from typing import List
from uuid import UUID

from sqlalchemy import desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from ballot.domain.model import AdminAction
from ballot.domain.repository import AdminActionRepository
from ballot.persistence.mappers import admin_action_to_dict, row_to_admin_action
from ballot.persistence.tables import admin_actions_table


class PostgresAdminActionRepository(AdminActionRepository):
    """PostgreSQL implementation of AdminActionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, action: AdminAction) -> AdminAction:
        """Append an audit record inside a savepoint.

        If the insert fails only the savepoint is rolled back and the
        error propagates to the caller, which decides whether to ignore it.
        """
        stmt = insert(admin_actions_table).values(**admin_action_to_dict(action))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return action

    async def find_by_target(self, target_id: UUID) -> List[AdminAction]:
        """List audit records about one entity, newest first."""
        stmt = (
            select(admin_actions_table)
            .where(admin_actions_table.c.target_id == target_id)
            .order_by(desc(admin_actions_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_admin_action(dict(row)) for row in result.mappings().all()]
