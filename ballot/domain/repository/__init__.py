"""Repository interfaces for the ballot domain.

Interfaces live in the domain layer; implementations live in persistence.
"""

from ballot.domain.repository.admin_action import AdminActionRepository
from ballot.domain.repository.comment import CommentRepository
from ballot.domain.repository.poll import PollRepository
from ballot.domain.repository.user import ProfileRepository, UserRepository
from ballot.domain.repository.vote import CommentVoteRepository, VoteRepository

__all__ = [
    "UserRepository",
    "ProfileRepository",
    "PollRepository",
    "VoteRepository",
    "CommentVoteRepository",
    "CommentRepository",
    "AdminActionRepository",
]
