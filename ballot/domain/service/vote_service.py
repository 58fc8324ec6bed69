"""Vote domain service.

Poll votes: one per user per poll, moved in place when the user picks
another option. Comment votes: one per user per comment, removed when
the same direction is cast again.
"""

from datetime import datetime
from typing import Optional, Sequence
from uuid import uuid4

import logfire

from ballot.domain.error import InvalidInputError, NotFoundError
from ballot.domain.model.poll import Option
from ballot.domain.model.vote import CommentVote, Vote
from ballot.domain.repository import (
    CommentVoteRepository,
    PollRepository,
    VoteRepository,
)
from ballot.domain.value import (
    CommentId,
    CommentVoteId,
    CommentVoteType,
    PollId,
    UserId,
    VoteAction,
    VoteId,
    VoteTally,
)

from .base import Service
from .comment_service import CommentService
from .poll_service import OPTION_MAX_LENGTH, PollService


class VoteService(Service):
    """Domain service for poll and comment votes."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        comment_vote_repository: CommentVoteRepository,
        poll_repository: PollRepository,
        poll_service: PollService,
        comment_service: CommentService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Poll vote repository
            comment_vote_repository: Comment vote repository
            poll_repository: Poll repository (option resolution)
            poll_service: Poll domain service
            comment_service: Comment domain service
        """
        self.vote_repository = vote_repository
        self.comment_vote_repository = comment_vote_repository
        self.poll_repository = poll_repository
        self.poll_service = poll_service
        self.comment_service = comment_service

    async def cast_vote(
        self, poll_id: PollId, user_id: UserId, option_text: str
    ) -> Option:
        """Record the user's choice on a poll.

        The option is resolved by text and created if it doesn't exist yet.
        A user who already voted has their vote moved to the new option;
        repeating the same choice leaves a single vote in place.

        Args:
            poll_id: Poll ID
            user_id: Voter
            option_text: Text of the chosen option

        Returns:
            The option the user's vote now points at

        Raises:
            InvalidInputError: If the option text is blank or too long
            NotFoundError: If the poll doesn't exist or is inactive
        """
        with logfire.span(
            "vote_service.cast_vote", poll_id=str(poll_id), user_id=str(user_id)
        ):
            text = (option_text or "").strip()
            if not text:
                raise InvalidInputError("Missing pollId or optionText")
            if len(text) > OPTION_MAX_LENGTH:
                raise InvalidInputError(
                    f"Options must be at most {OPTION_MAX_LENGTH} characters"
                )

            poll = await self.poll_service.get_or_bootstrap_poll(poll_id, user_id)
            if not poll or not poll.is_active:
                logfire.warn(
                    "Vote on missing or inactive poll",
                    poll_id=str(poll_id),
                    exists=poll is not None,
                )
                raise NotFoundError("Poll", str(poll_id))

            option = await self.poll_repository.get_or_create_option(poll_id, text)

            stored = await self.vote_repository.upsert(
                Vote(
                    id=VoteId(uuid4()),
                    poll_id=poll_id,
                    option_id=option.id,
                    user_id=user_id,
                    created_at=datetime.now(),
                )
            )
            logfire.info(
                "Vote recorded",
                poll_id=str(poll_id),
                user_id=str(user_id),
                option_id=str(option.id),
                vote_id=str(stored.id),
            )
            return option

    async def cast_comment_vote(
        self, comment_id: CommentId, user_id: UserId, vote_type: int
    ) -> tuple[VoteAction, VoteTally]:
        """Toggle the user's vote on a comment.

        - Same direction as the existing vote: the vote is removed
        - Opposite direction: the vote is flipped
        - No existing vote: a vote is created

        Args:
            comment_id: Comment ID
            user_id: Voter
            vote_type: 1 for up, -1 for down

        Returns:
            What happened, and the comment's tally after the change

        Raises:
            InvalidInputError: If vote_type is not 1 or -1
            NotFoundError: If the comment doesn't exist or is deleted
        """
        with logfire.span(
            "vote_service.cast_comment_vote",
            comment_id=str(comment_id),
            user_id=str(user_id),
            vote_type=vote_type,
        ):
            try:
                direction = CommentVoteType(vote_type)
            except ValueError:
                raise InvalidInputError("Invalid vote type. Must be 1 or -1")

            comment = await self.comment_service.get_comment(comment_id)
            if not comment or comment.is_deleted:
                raise NotFoundError("Comment", str(comment_id))

            removed = await self.comment_vote_repository.delete_matching(
                comment_id, user_id, direction
            )
            if removed:
                action = VoteAction.REMOVED
            else:
                inserted = await self.comment_vote_repository.upsert(
                    CommentVote(
                        id=CommentVoteId(uuid4()),
                        comment_id=comment_id,
                        user_id=user_id,
                        vote_type=direction,
                        created_at=datetime.now(),
                    )
                )
                action = VoteAction.CREATED if inserted else VoteAction.UPDATED

            tallies = await self.get_tallies([comment_id], user_id)
            logfire.info(
                "Comment vote cast",
                comment_id=str(comment_id),
                user_id=str(user_id),
                action=action.value,
            )
            return action, tallies[comment_id]

    async def get_tallies(
        self, comment_ids: Sequence[CommentId], user_id: Optional[UserId] = None
    ) -> dict[CommentId, VoteTally]:
        """Count votes on comments, including the caller's own vote.

        Args:
            comment_ids: Comments to count
            user_id: Caller, if authenticated

        Returns:
            Tally for every requested comment
        """
        if not comment_ids:
            return {}

        tallies = await self.comment_vote_repository.tally(comment_ids)
        if user_id is None:
            return tallies

        # Batch query to avoid one lookup per comment
        own_votes = await self.comment_vote_repository.find_by_user_and_comments(
            user_id, comment_ids
        )
        own_by_comment = {v.comment_id: v.vote_type for v in own_votes}
        return {
            cid: tally.model_copy(update={"user_vote": own_by_comment.get(cid)})
            for cid, tally in tallies.items()
        }
