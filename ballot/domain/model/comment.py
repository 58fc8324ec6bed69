"""Comment entity.

Comments attach to a poll, or to the community discussion board when
``poll_id`` is None. Replies point at their parent; deletion is a flag.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ballot.domain.model.common import DomainModel
from ballot.domain.value import CommentId, PollId, UserId


class Comment(DomainModel):
    """Comment entity."""

    id: CommentId
    poll_id: Optional[PollId] = None
    parent_id: Optional[CommentId] = None
    content: str = Field(min_length=1)
    user_id: UserId
    is_deleted: bool = False
    is_edited: bool = False
    reply_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
