"""In-memory vote repositories for testing."""

from typing import Dict, List, Optional, Sequence

from ballot.domain.model.vote import CommentVote, Vote
from ballot.domain.repository.vote import CommentVoteRepository, VoteRepository
from ballot.domain.value import (
    CommentId,
    CommentVoteType,
    OptionId,
    PollId,
    UserId,
    VoteTally,
)


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[tuple[PollId, UserId], Vote] = {}

    async def find_by_poll_and_user(
        self, poll_id: PollId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a poll."""
        return self._votes.get((poll_id, user_id))

    async def upsert(self, vote: Vote) -> Vote:
        """Insert the vote, or move an existing vote to the new option."""
        key = (vote.poll_id, vote.user_id)
        existing = self._votes.get(key)
        stored = (
            existing.model_copy(update={"option_id": vote.option_id})
            if existing
            else vote
        )
        self._votes[key] = stored
        return stored

    async def count_by_option(self, poll_id: PollId) -> Dict[OptionId, int]:
        """Count votes per option of a poll."""
        counts: Dict[OptionId, int] = {}
        for vote in self._votes.values():
            if vote.poll_id == poll_id:
                counts[vote.option_id] = counts.get(vote.option_id, 0) + 1
        return counts


class InMemoryCommentVoteRepository(CommentVoteRepository):
    """In-memory implementation of CommentVoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[tuple[CommentId, UserId], CommentVote] = {}

    async def find_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[CommentVote]:
        """Find a user's vote on a comment."""
        return self._votes.get((comment_id, user_id))

    async def delete_matching(
        self,
        comment_id: CommentId,
        user_id: UserId,
        vote_type: CommentVoteType,
    ) -> bool:
        """Delete the user's vote on a comment if it has the given type."""
        existing = self._votes.get((comment_id, user_id))
        if existing is None or existing.vote_type != vote_type:
            return False
        del self._votes[(comment_id, user_id)]
        return True

    async def upsert(self, vote: CommentVote) -> bool:
        """Insert the vote, or overwrite the type of an existing one."""
        key = (vote.comment_id, vote.user_id)
        existing = self._votes.get(key)
        if existing:
            self._votes[key] = existing.model_copy(update={"vote_type": vote.vote_type})
            return False
        self._votes[key] = vote
        return True

    async def tally(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, VoteTally]:
        """Count up and down votes for several comments."""
        result: Dict[CommentId, VoteTally] = {}
        for cid in comment_ids:
            types = [v.vote_type for (c, _), v in self._votes.items() if c == cid]
            result[cid] = VoteTally(
                upvotes=types.count(CommentVoteType.UP),
                downvotes=types.count(CommentVoteType.DOWN),
            )
        return result

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> List[CommentVote]:
        """Find a user's votes on several comments."""
        wanted = set(comment_ids)
        return [
            v
            for (cid, uid), v in self._votes.items()
            if uid == user_id and cid in wanted
        ]
