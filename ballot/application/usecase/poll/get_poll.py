"""Get poll use case."""

from pydantic import BaseModel

from ballot.application.usecase.base import parse_uuid
from ballot.domain.error import NotFoundError
from ballot.domain.service import PollService
from ballot.domain.value import PollId

from .common import PollItem, PollResponse


class GetPollRequest(BaseModel):
    """Get poll request."""

    poll_id: str


class GetPollUseCase:
    """Use case for reading one poll with its results."""

    def __init__(self, poll_service: PollService) -> None:
        """Initialize get poll use case.

        Args:
            poll_service: Poll domain service
        """
        self.poll_service = poll_service

    async def execute(self, request: GetPollRequest) -> PollResponse:
        """Execute get poll flow.

        Raises:
            NotFoundError: If the ID is malformed or the poll doesn't exist
        """
        poll_uuid = parse_uuid(request.poll_id)
        poll = await self.poll_service.get_poll(PollId(poll_uuid)) if poll_uuid else None
        if not poll:
            raise NotFoundError("Poll", request.poll_id)

        results = await self.poll_service.get_results(poll)
        return PollResponse(poll=PollItem.from_results(results))
