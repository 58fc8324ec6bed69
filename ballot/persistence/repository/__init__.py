"""PostgreSQL repository implementations."""

from ballot.persistence.repository.admin_action import PostgresAdminActionRepository
from ballot.persistence.repository.comment import PostgresCommentRepository
from ballot.persistence.repository.poll import PostgresPollRepository
from ballot.persistence.repository.user import (
    PostgresProfileRepository,
    PostgresUserRepository,
)
from ballot.persistence.repository.vote import (
    PostgresCommentVoteRepository,
    PostgresVoteRepository,
)

__all__ = [
    "PostgresUserRepository",
    "PostgresProfileRepository",
    "PostgresPollRepository",
    "PostgresVoteRepository",
    "PostgresCommentVoteRepository",
    "PostgresCommentRepository",
    "PostgresAdminActionRepository",
]
