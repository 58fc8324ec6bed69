"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from ballot.domain.model import (
    AdminAction,
    Comment,
    CommentVote,
    Option,
    Poll,
    Profile,
    User,
    Vote,
)
from ballot.domain.value import (
    AdminActionId,
    AdminActionType,
    CommentId,
    CommentVoteId,
    CommentVoteType,
    OptionId,
    PollId,
    Role,
    TargetType,
    UserId,
    Username,
    VoteId,
)


def as_uuid(value: Any) -> UUID:
    """Normalize a UUID column value (asyncpg returns its own UUID type)."""
    return value if isinstance(value, UUID) else UUID(str(value))


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(as_uuid(row["id"])),
        email=row["email"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model.

    Args:
        row: Database row as dict

    Returns:
        Profile domain model
    """
    return Profile(
        user_id=UserId(as_uuid(row["user_id"])),
        username=Username(row["username"]) if row.get("username") else None,
        display_name=row.get("display_name"),
        role=Role(row["role"]),
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict.

    Args:
        profile: Profile domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = profile.model_dump()
    data["role"] = profile.role.value
    return data


def row_to_poll(row: Dict[str, Any]) -> Poll:
    """Convert database row to Poll domain model."""
    return Poll(
        id=PollId(as_uuid(row["id"])),
        title=row["title"],
        description=row.get("description"),
        is_active=row["is_active"],
        user_id=UserId(as_uuid(row["user_id"])) if row.get("user_id") else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def poll_to_dict(poll: Poll) -> Dict[str, Any]:
    """Convert Poll domain model to database dict."""
    return poll.model_dump()


def row_to_option(row: Dict[str, Any]) -> Option:
    """Convert database row to Option domain model."""
    return Option(
        id=OptionId(as_uuid(row["id"])),
        poll_id=PollId(as_uuid(row["poll_id"])),
        text=row["text"],
        created_at=row["created_at"],
    )


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(as_uuid(row["id"])),
        poll_id=PollId(as_uuid(row["poll_id"])),
        option_id=OptionId(as_uuid(row["option_id"])),
        user_id=UserId(as_uuid(row["user_id"])),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(as_uuid(row["id"])),
        poll_id=PollId(as_uuid(row["poll_id"])) if row.get("poll_id") else None,
        parent_id=CommentId(as_uuid(row["parent_id"])) if row.get("parent_id") else None,
        content=row["content"],
        user_id=UserId(as_uuid(row["user_id"])),
        is_deleted=row["is_deleted"],
        is_edited=row["is_edited"],
        reply_count=row["reply_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_comment_vote(row: Dict[str, Any]) -> CommentVote:
    """Convert database row to CommentVote domain model."""
    return CommentVote(
        id=CommentVoteId(as_uuid(row["id"])),
        comment_id=CommentId(as_uuid(row["comment_id"])),
        user_id=UserId(as_uuid(row["user_id"])),
        vote_type=CommentVoteType(row["vote_type"]),
        created_at=row["created_at"],
    )


def comment_vote_to_dict(vote: CommentVote) -> Dict[str, Any]:
    """Convert CommentVote domain model to database dict."""
    data = vote.model_dump()
    data["vote_type"] = int(vote.vote_type)
    return data


def row_to_admin_action(row: Dict[str, Any]) -> AdminAction:
    """Convert database row to AdminAction domain model."""
    return AdminAction(
        id=AdminActionId(as_uuid(row["id"])),
        admin_id=UserId(as_uuid(row["admin_id"])),
        action_type=AdminActionType(row["action_type"]),
        target_id=as_uuid(row["target_id"]),
        target_type=TargetType(row["target_type"]),
        action_details=row.get("action_details") or {},
        created_at=row["created_at"],
    )


def admin_action_to_dict(action: AdminAction) -> Dict[str, Any]:
    """Convert AdminAction domain model to database dict."""
    data = action.model_dump()
    data["action_type"] = action.action_type.value
    data["target_type"] = action.target_type.value
    return data
