"""Vote on comment use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel

from ballot.application.usecase.base import parse_uuid
from ballot.domain.error import InvalidInputError, NotFoundError
from ballot.domain.service import VoteService
from ballot.domain.value import CommentId, UserId, VoteAction

from .common import VotesItem


class VoteCommentRequest(BaseModel):
    """Vote on comment request."""

    comment_id: str
    user_id: str  # From authenticated user
    vote_type: Any = None  # Validated by the vote service (1 or -1)


class VoteCommentResponse(BaseModel):
    """Vote on comment response."""

    success: bool
    action: VoteAction
    votes: VotesItem


def _coerce_vote_type(value: Any) -> int:
    """Accept 1 or -1, including JSON numbers such as 1.0.

    Raises:
        InvalidInputError: For booleans, strings, fractions or other values
    """
    if isinstance(value, bool):
        raise InvalidInputError("Invalid vote type. Must be 1 or -1")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or value not in (1, -1):
        raise InvalidInputError("Invalid vote type. Must be 1 or -1")
    return value


class VoteCommentUseCase:
    """Use case for toggling an up or down vote on a comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize vote comment use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: VoteCommentRequest) -> VoteCommentResponse:
        """Execute vote comment flow.

        Raises:
            InvalidInputError: If vote type is not 1 or -1
            NotFoundError: If the comment doesn't exist or is deleted
        """
        vote_type = _coerce_vote_type(request.vote_type)

        comment_uuid = parse_uuid(request.comment_id)
        if not comment_uuid:
            raise NotFoundError("Comment", request.comment_id)

        action, tally = await self.vote_service.cast_comment_vote(
            CommentId(comment_uuid),
            UserId(UUID(request.user_id)),
            vote_type,
        )
        return VoteCommentResponse(
            success=True, action=action, votes=VotesItem.from_tally(tally)
        )
