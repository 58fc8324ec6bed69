"""In-memory repository implementations for testing."""

from .admin_action import InMemoryAdminActionRepository
from .comment import InMemoryCommentRepository
from .poll import InMemoryPollRepository
from .user import InMemoryProfileRepository, InMemoryUserRepository
from .vote import InMemoryCommentVoteRepository, InMemoryVoteRepository

__all__ = [
    "InMemoryAdminActionRepository",
    "InMemoryCommentRepository",
    "InMemoryCommentVoteRepository",
    "InMemoryPollRepository",
    "InMemoryProfileRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
