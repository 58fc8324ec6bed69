"""Response models shared by poll use cases."""

from datetime import datetime

from pydantic import BaseModel

from ballot.domain.model.poll import PollResults


class OptionItem(BaseModel):
    """Option with its vote count."""

    id: str
    text: str
    vote_count: int
    created_at: datetime


class PollItem(BaseModel):
    """Poll with ranked options."""

    id: str
    title: str
    description: str | None
    is_active: bool
    user_id: str | None
    created_at: datetime
    updated_at: datetime
    total_votes: int
    option_count: int
    options: list[OptionItem]

    @classmethod
    def from_results(cls, results: PollResults) -> "PollItem":
        """Build the response item from aggregated poll results."""
        poll = results.poll
        return cls(
            id=str(poll.id),
            title=poll.title,
            description=poll.description,
            is_active=poll.is_active,
            user_id=str(poll.user_id) if poll.user_id else None,
            created_at=poll.created_at,
            updated_at=poll.updated_at,
            total_votes=results.total_votes,
            option_count=len(results.options),
            options=[
                OptionItem(
                    id=str(r.option.id),
                    text=r.option.text,
                    vote_count=r.vote_count,
                    created_at=r.option.created_at,
                )
                for r in results.options
            ],
        )


class PollResponse(BaseModel):
    """Single poll response."""

    poll: PollItem
