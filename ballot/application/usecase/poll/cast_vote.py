"""Cast poll vote use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from ballot.application.usecase.base import parse_uuid
from ballot.domain.error import InvalidInputError
from ballot.domain.service import VoteService
from ballot.domain.value import PollId, UserId


class VotedOptionItem(BaseModel):
    """Option the vote now points at."""

    id: str
    poll_id: str
    text: str
    created_at: datetime


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    user_id: str  # From authenticated user
    poll_id: str | None = None
    option_text: str | None = None


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    success: bool
    message: str
    option: VotedOptionItem


class CastVoteUseCase:
    """Use case for voting on a poll by option text.

    Voting again on the same poll moves the user's single vote.
    """

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Voter, poll and option text

        Returns:
            Confirmation with the chosen option

        Raises:
            InvalidInputError: If poll ID or option text is missing or malformed
            NotFoundError: If the poll doesn't exist or is inactive
        """
        if not request.poll_id or not (request.option_text or "").strip():
            raise InvalidInputError("Missing pollId or optionText")

        poll_uuid = parse_uuid(request.poll_id)
        if not poll_uuid:
            raise InvalidInputError(f"Invalid pollId: {request.poll_id}")

        option = await self.vote_service.cast_vote(
            PollId(poll_uuid),
            UserId(UUID(request.user_id)),
            request.option_text,
        )

        return CastVoteResponse(
            success=True,
            message="Vote recorded successfully",
            option=VotedOptionItem(
                id=str(option.id),
                poll_id=str(option.poll_id),
                text=option.text,
                created_at=option.created_at,
            ),
        )
