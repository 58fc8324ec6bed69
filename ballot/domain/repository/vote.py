"""Vote repository interfaces."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from ballot.domain.model.vote import CommentVote, Vote
from ballot.domain.value import (
    CommentId,
    CommentVoteType,
    OptionId,
    PollId,
    UserId,
    VoteTally,
)


class VoteRepository(ABC):
    """Repository for poll votes.

    The store guarantees at most one vote per ``(poll_id, user_id)``.
    """

    @abstractmethod
    async def find_by_poll_and_user(
        self, poll_id: PollId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a poll.

        Read-back for tests; voting itself goes through ``upsert``.

        Args:
            poll_id: The poll's ID
            user_id: The user's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def upsert(self, vote: Vote) -> Vote:
        """Insert the vote, or move an existing vote to ``vote.option_id``.

        Must be a single atomic statement keyed on ``(poll_id, user_id)``.

        Args:
            vote: The vote to store

        Returns:
            The stored vote (keeps the original ID when it already existed)
        """
        pass

    @abstractmethod
    async def count_by_option(self, poll_id: PollId) -> Dict[OptionId, int]:
        """Count votes per option of a poll.

        Args:
            poll_id: The poll's ID

        Returns:
            Mapping of option ID to vote count; options without votes are absent
        """
        pass


class CommentVoteRepository(ABC):
    """Repository for comment votes.

    The store guarantees at most one vote per ``(comment_id, user_id)``.
    """

    @abstractmethod
    async def find_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[CommentVote]:
        """Find a user's vote on a comment.

        Read-back for tests; toggling goes through ``delete_matching`` and
        ``upsert``.

        Args:
            comment_id: The comment's ID
            user_id: The user's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def delete_matching(
        self,
        comment_id: CommentId,
        user_id: UserId,
        vote_type: CommentVoteType,
    ) -> bool:
        """Delete the user's vote on a comment if it has the given type.

        Args:
            comment_id: The comment's ID
            user_id: The user's ID
            vote_type: Only a vote of this type is deleted

        Returns:
            True if a vote was deleted
        """
        pass

    @abstractmethod
    async def upsert(self, vote: CommentVote) -> bool:
        """Insert the vote, or overwrite the type of an existing one.

        Must be a single atomic statement keyed on ``(comment_id, user_id)``.

        Args:
            vote: The vote to store

        Returns:
            True if a new row was inserted, False if an existing row was updated
        """
        pass

    @abstractmethod
    async def tally(self, comment_ids: Sequence[CommentId]) -> Dict[CommentId, VoteTally]:
        """Count up and down votes for several comments (batch query).

        Args:
            comment_ids: Comments to count

        Returns:
            Mapping with an entry for every requested comment
        """
        pass

    @abstractmethod
    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> List[CommentVote]:
        """Find a user's votes on several comments (batch query).

        Args:
            user_id: The user's ID
            comment_ids: Comments to check

        Returns:
            Votes by the user on the given comments
        """
        pass
