"""List polls use case."""

from pydantic import BaseModel

from ballot.domain.service import PollService

from .common import PollItem


class ListPollsResponse(BaseModel):
    """List polls response."""

    polls: list[PollItem]


class ListPollsUseCase:
    """Use case for listing every poll, newest first."""

    def __init__(self, poll_service: PollService) -> None:
        """Initialize list polls use case.

        Args:
            poll_service: Poll domain service
        """
        self.poll_service = poll_service

    async def execute(self) -> ListPollsResponse:
        """Execute list polls flow."""
        results = await self.poll_service.list_polls()
        return ListPollsResponse(polls=[PollItem.from_results(r) for r in results])
