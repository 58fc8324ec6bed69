"""Domain services."""

from .admin_action_service import AdminActionService
from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .poll_service import PollService, rank_options
from .profile_service import ProfileService
from .vote_service import VoteService

__all__ = [
    "AdminActionService",
    "CommentService",
    "JWTService",
    "PollService",
    "ProfileService",
    "Service",
    "VoteService",
    "rank_options",
]
