"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ballot.domain.model import Comment
from ballot.domain.repository import CommentRepository
from ballot.domain.value import CommentId, PollId
from ballot.persistence.mappers import comment_to_dict, row_to_comment
from ballot.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_poll(
        self, poll_id: Optional[PollId], include_deleted: bool = False
    ) -> List[Comment]:
        """Find the comments of a poll (or the discussion board), newest first."""
        if poll_id is None:
            stmt = select(comments_table).where(comments_table.c.poll_id.is_(None))
        else:
            stmt = select(comments_table).where(comments_table.c.poll_id == poll_id)

        if not include_deleted:
            stmt = stmt.where(comments_table.c.is_deleted.is_(False))

        stmt = stmt.order_by(desc(comments_table.c.created_at))
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def find_recent_roots(self, limit: int) -> List[Comment]:
        """Find the newest non-deleted top-level comments."""
        stmt = (
            select(comments_table)
            .where(
                and_(
                    comments_table.c.is_deleted.is_(False),
                    comments_table.c.parent_id.is_(None),
                )
            )
            .order_by(desc(comments_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a live comment and mark it edited."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.is_deleted.is_(False))
            .values(content=content, is_edited=True, updated_at=datetime.now())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if row is None:
            # Comment not found or deleted
            return None

        await self.session.flush()
        return row_to_comment(dict(row))

    async def soft_delete(self, comment_id: CommentId) -> bool:
        """Flag a live comment as deleted."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.is_deleted.is_(False))
            .values(is_deleted=True, updated_at=datetime.now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def increment_reply_count(self, comment_id: CommentId) -> None:
        """Atomically increment reply_count by 1."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(reply_count=comments_table.c.reply_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
