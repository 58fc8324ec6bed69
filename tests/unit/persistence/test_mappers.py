"""Unit tests for row/domain mappers."""

from datetime import datetime
from uuid import uuid4

from ballot.domain.model.user import Profile
from ballot.domain.value import (
    AdminActionType,
    CommentVoteType,
    Role,
    TargetType,
    UserId,
    Username,
)
from ballot.persistence.mappers import (
    profile_to_dict,
    row_to_admin_action,
    row_to_comment,
    row_to_comment_vote,
    row_to_profile,
)


class TestProfileMapping:
    """Profile rows carry the role as text and the username as a plain string."""

    def test_profile_to_dict_flattens_value_objects(self):
        profile = Profile(
            user_id=UserId(uuid4()),
            username=Username("ada_l"),
            role=Role.MODERATOR,
        )

        data = profile_to_dict(profile)

        assert data["username"] == "ada_l"
        assert data["role"] == "moderator"

    def test_row_to_profile(self):
        now = datetime.now()
        user_id = uuid4()

        profile = row_to_profile(
            {
                "user_id": str(user_id),
                "username": None,
                "display_name": "Ada",
                "role": "admin",
                "is_active": True,
                "created_at": now,
                "updated_at": now,
            }
        )

        assert profile.user_id == user_id
        assert profile.username is None
        assert profile.role == Role.ADMIN


class TestCommentMapping:
    def test_board_comment_has_no_poll(self):
        now = datetime.now()

        comment = row_to_comment(
            {
                "id": uuid4(),
                "poll_id": None,
                "parent_id": None,
                "content": "Hello",
                "user_id": uuid4(),
                "is_deleted": False,
                "is_edited": True,
                "reply_count": 2,
                "created_at": now,
                "updated_at": now,
            }
        )

        assert comment.poll_id is None
        assert comment.is_edited
        assert comment.reply_count == 2

    def test_comment_vote_type_from_smallint(self):
        vote = row_to_comment_vote(
            {
                "id": uuid4(),
                "comment_id": uuid4(),
                "user_id": uuid4(),
                "vote_type": -1,
                "created_at": datetime.now(),
            }
        )

        assert vote.vote_type == CommentVoteType.DOWN


def test_admin_action_defaults_details():
    """A NULL details column maps to an empty dict."""
    action = row_to_admin_action(
        {
            "id": uuid4(),
            "admin_id": uuid4(),
            "action_type": "delete_comment",
            "target_id": uuid4(),
            "target_type": "comment",
            "action_details": None,
            "created_at": datetime.now(),
        }
    )

    assert action.action_type == AdminActionType.DELETE_COMMENT
    assert action.target_type == TargetType.COMMENT
    assert action.action_details == {}
