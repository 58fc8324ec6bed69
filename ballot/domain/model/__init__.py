"""Domain model entities for ballot."""

from ballot.domain.model.admin_action import AdminAction
from ballot.domain.model.comment import Comment
from ballot.domain.model.poll import Option, OptionResult, Poll, PollResults
from ballot.domain.model.user import Profile, User
from ballot.domain.model.vote import CommentVote, Vote

__all__ = [
    "User",
    "Profile",
    "Poll",
    "Option",
    "OptionResult",
    "PollResults",
    "Vote",
    "CommentVote",
    "Comment",
    "AdminAction",
]
