"""PostgreSQL implementation of Poll repository."""

from datetime import datetime
from typing import List, Optional
from uuid import uuid4

from sqlalchemy import and_, delete, desc, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from ballot.domain.model import Option, Poll
from ballot.domain.repository import PollRepository
from ballot.domain.value import PollId
from ballot.persistence.mappers import poll_to_dict, row_to_option, row_to_poll
from ballot.persistence.tables import options_table, polls_table


class PostgresPollRepository(PollRepository):
    """PostgreSQL implementation of PollRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, poll_id: PollId) -> Optional[Poll]:
        """Find a poll by ID."""
        stmt = select(polls_table).where(polls_table.c.id == poll_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_poll(dict(row)) if row else None

    async def find_all(self) -> List[Poll]:
        """List all polls, newest first."""
        stmt = select(polls_table).order_by(desc(polls_table.c.created_at))
        result = await self.session.execute(stmt)
        return [row_to_poll(dict(row)) for row in result.mappings().all()]

    async def save(self, poll: Poll) -> Poll:
        """Save a poll (create or update)."""
        values = poll_to_dict(poll)
        existing = await self.find_by_id(poll.id)

        if existing:
            stmt = (
                update(polls_table)
                .where(polls_table.c.id == poll.id)
                .values(
                    title=values["title"],
                    description=values["description"],
                    is_active=values["is_active"],
                    updated_at=values["updated_at"],
                )
                .returning(polls_table)
            )
        else:
            # Two first votes on the bootstrap poll may race to create it
            stmt = (
                insert(polls_table)
                .values(**values)
                .on_conflict_do_nothing(index_elements=[polls_table.c.id])
                .returning(polls_table)
            )

        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        if row is None:
            return await self.find_by_id(poll.id) or poll
        return row_to_poll(dict(row))

    async def delete(self, poll_id: PollId) -> bool:
        """Hard delete a poll (options, votes and comments cascade)."""
        stmt = delete(polls_table).where(polls_table.c.id == poll_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_options(self, poll_id: PollId) -> List[Option]:
        """List the options of a poll in creation order."""
        stmt = (
            select(options_table)
            .where(options_table.c.poll_id == poll_id)
            .order_by(options_table.c.created_at, options_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_option(dict(row)) for row in result.mappings().all()]

    async def get_or_create_option(self, poll_id: PollId, text: str) -> Option:
        """Resolve an option by (poll_id, text), creating it if absent.

        Insert-on-conflict-do-nothing followed by a select, so concurrent
        callers converge on the same row.
        """
        stmt = (
            insert(options_table)
            .values(id=uuid4(), poll_id=poll_id, text=text, created_at=datetime.now())
            .on_conflict_do_nothing(
                index_elements=[options_table.c.poll_id, options_table.c.text]
            )
        )
        await self.session.execute(stmt)

        select_stmt = select(options_table).where(
            and_(options_table.c.poll_id == poll_id, options_table.c.text == text)
        )
        result = await self.session.execute(select_stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_option(dict(row))
