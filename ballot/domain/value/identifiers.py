"""Strongly typed identifiers for ballot domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PollId = NewType("PollId", UUID)
OptionId = NewType("OptionId", UUID)
VoteId = NewType("VoteId", UUID)
CommentId = NewType("CommentId", UUID)
CommentVoteId = NewType("CommentVoteId", UUID)
AdminActionId = NewType("AdminActionId", UUID)
