"""Domain value objects for ballot."""

from ballot.domain.value.identifiers import (
    AdminActionId,
    CommentId,
    CommentVoteId,
    OptionId,
    PollId,
    UserId,
    VoteId,
)
from ballot.domain.value.types import (
    AdminActionType,
    CommentVoteType,
    Role,
    TargetType,
    Username,
    VoteAction,
    VoteTally,
)

__all__ = [
    # Identifiers
    "UserId",
    "PollId",
    "OptionId",
    "VoteId",
    "CommentId",
    "CommentVoteId",
    "AdminActionId",
    # Types
    "Role",
    "CommentVoteType",
    "VoteAction",
    "AdminActionType",
    "TargetType",
    "Username",
    "VoteTally",
]
