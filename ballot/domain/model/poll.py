"""Poll aggregate.

A poll owns its options. Votes reference both the poll and the chosen
option so the one-vote-per-user rule can be enforced on ``(poll_id, user_id)``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ballot.domain.model.common import DomainModel
from ballot.domain.value import OptionId, PollId, UserId


class Poll(DomainModel):
    """Poll entity.

    Business rules:
    - An inactive poll rejects new votes and new comments
    - Only the creator or an admin may update or delete it
    """

    id: PollId
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    is_active: bool = True
    user_id: Optional[UserId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class Option(DomainModel):
    """A votable choice, unique per ``(poll_id, text)``."""

    id: OptionId
    poll_id: PollId
    text: str = Field(min_length=1, max_length=200)
    created_at: datetime = Field(default_factory=datetime.now)


class OptionResult(DomainModel):
    """An option together with the number of votes it holds."""

    option: Option
    vote_count: int = Field(default=0, ge=0)


class PollResults(DomainModel):
    """A poll with its options ranked by vote count, highest first."""

    poll: Poll
    options: list[OptionResult]
    total_votes: int = Field(default=0, ge=0)
