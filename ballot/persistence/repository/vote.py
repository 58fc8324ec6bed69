"""PostgreSQL implementations of the vote repositories.

Both use single-statement upserts against the unique keys, so concurrent
votes by the same user can never produce a second row.
"""

from typing import Dict, List, Optional, Sequence

from sqlalchemy import and_, case, delete, func, literal_column, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from ballot.domain.model import CommentVote, Vote
from ballot.domain.repository import CommentVoteRepository, VoteRepository
from ballot.domain.value import (
    CommentId,
    CommentVoteType,
    OptionId,
    PollId,
    UserId,
    VoteTally,
)
from ballot.persistence.mappers import (
    as_uuid,
    comment_vote_to_dict,
    row_to_comment_vote,
    row_to_vote,
    vote_to_dict,
)
from ballot.persistence.tables import comment_votes_table, votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_poll_and_user(
        self, poll_id: PollId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a poll."""
        stmt = select(votes_table).where(
            and_(votes_table.c.poll_id == poll_id, votes_table.c.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_vote(dict(row)) if row else None

    async def upsert(self, vote: Vote) -> Vote:
        """Insert the vote, or move an existing vote to the new option."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        stmt = stmt.on_conflict_do_update(
            constraint="uq_vote_poll_user",
            set_={"option_id": stmt.excluded.option_id},
        ).returning(votes_table)
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_vote(dict(row))

    async def count_by_option(self, poll_id: PollId) -> Dict[OptionId, int]:
        """Count votes per option of a poll."""
        stmt = (
            select(votes_table.c.option_id, func.count().label("vote_count"))
            .where(votes_table.c.poll_id == poll_id)
            .group_by(votes_table.c.option_id)
        )
        result = await self.session.execute(stmt)
        return {
            OptionId(as_uuid(row["option_id"])): row["vote_count"]
            for row in result.mappings().all()
        }


class PostgresCommentVoteRepository(CommentVoteRepository):
    """PostgreSQL implementation of CommentVoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[CommentVote]:
        """Find a user's vote on a comment."""
        stmt = select(comment_votes_table).where(
            and_(
                comment_votes_table.c.comment_id == comment_id,
                comment_votes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment_vote(dict(row)) if row else None

    async def delete_matching(
        self,
        comment_id: CommentId,
        user_id: UserId,
        vote_type: CommentVoteType,
    ) -> bool:
        """Delete the user's vote on a comment if it has the given type."""
        stmt = delete(comment_votes_table).where(
            and_(
                comment_votes_table.c.comment_id == comment_id,
                comment_votes_table.c.user_id == user_id,
                comment_votes_table.c.vote_type == int(vote_type),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def upsert(self, vote: CommentVote) -> bool:
        """Insert the vote, or overwrite the type of an existing one.

        ``xmax = 0`` holds only for a freshly inserted row version, which
        tells an insert apart from a conflict update in one round trip.
        """
        stmt = insert(comment_votes_table).values(**comment_vote_to_dict(vote))
        stmt = stmt.on_conflict_do_update(
            constraint="uq_comment_vote_user",
            set_={"vote_type": stmt.excluded.vote_type},
        ).returning(literal_column("(xmax = 0)").label("inserted"))
        result = await self.session.execute(stmt)
        inserted = result.scalar_one()
        await self.session.flush()
        return bool(inserted)

    async def tally(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, VoteTally]:
        """Count up and down votes for several comments (batch query)."""
        if not comment_ids:
            return {}

        up = func.count(case((comment_votes_table.c.vote_type == 1, 1)))
        down = func.count(case((comment_votes_table.c.vote_type == -1, 1)))
        stmt = (
            select(
                comment_votes_table.c.comment_id,
                up.label("upvotes"),
                down.label("downvotes"),
            )
            .where(comment_votes_table.c.comment_id.in_(comment_ids))
            .group_by(comment_votes_table.c.comment_id)
        )
        result = await self.session.execute(stmt)
        counted = {
            CommentId(as_uuid(row["comment_id"])): VoteTally(
                upvotes=row["upvotes"], downvotes=row["downvotes"]
            )
            for row in result.mappings().all()
        }
        return {cid: counted.get(cid, VoteTally()) for cid in comment_ids}

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> List[CommentVote]:
        """Find a user's votes on several comments (batch query)."""
        if not comment_ids:
            return []

        stmt = select(comment_votes_table).where(
            and_(
                comment_votes_table.c.user_id == user_id,
                comment_votes_table.c.comment_id.in_(comment_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_vote(dict(row)) for row in result.mappings().all()]
