"""Vote entities.

Poll votes move when a user picks a different option; comment votes
toggle off when the same direction is cast twice.
"""

from datetime import datetime

from pydantic import Field

from ballot.domain.model.common import DomainModel
from ballot.domain.value import (
    CommentId,
    CommentVoteId,
    CommentVoteType,
    OptionId,
    PollId,
    UserId,
    VoteId,
)


class Vote(DomainModel):
    """A user's single choice on a poll.

    At most one row per ``(poll_id, user_id)`` (database unique constraint).
    """

    id: VoteId
    poll_id: PollId
    option_id: OptionId
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)


class CommentVote(DomainModel):
    """An up or down vote on a comment.

    At most one row per ``(comment_id, user_id)`` (database unique constraint).
    """

    id: CommentVoteId
    comment_id: CommentId
    user_id: UserId
    vote_type: CommentVoteType
    created_at: datetime = Field(default_factory=datetime.now)
