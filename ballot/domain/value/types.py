"""Domain value types for ballot.

Enumerations used across polls, comments and moderation, plus the
small value objects that validate user-facing text.
"""

import re
from enum import Enum, IntEnum

from pydantic import field_validator

from ballot.domain.value.common import RootValueObject, ValueObject


class Role(str, Enum):
    """Coarse role stored on a user's profile."""

    USER = "user"
    MODERATOR = "moderator"
    ADMIN = "admin"

    @property
    def is_elevated(self) -> bool:
        """Admins and moderators may moderate content they don't own."""
        return self in (Role.ADMIN, Role.MODERATOR)


class CommentVoteType(IntEnum):
    """Direction of a comment vote."""

    UP = 1
    DOWN = -1


class VoteAction(str, Enum):
    """Outcome of casting a comment vote."""

    CREATED = "created"
    UPDATED = "updated"
    REMOVED = "removed"


class AdminActionType(str, Enum):
    """Privileged mutations recorded in the audit log."""

    UPDATE_USER_ROLE = "update_user_role"
    DELETE_POLL = "delete_poll"
    UPDATE_POLL = "update_poll"
    DELETE_COMMENT = "delete_comment"
    CLAIM_ADMIN = "claim_admin"


class TargetType(str, Enum):
    """Kind of entity an audit record points at."""

    USER = "user"
    POLL = "poll"
    COMMENT = "comment"


class Username(RootValueObject[str]):
    """Public username chosen by the user.

    3-30 characters: letters, digits, underscores, dots and hyphens.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_.-]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters of letters, digits, '_', '.' or '-'"
            )
        return v


class VoteTally(ValueObject):
    """Up and down vote counts on a comment, plus the caller's own vote."""

    upvotes: int = 0
    downvotes: int = 0
    user_vote: CommentVoteType | None = None
