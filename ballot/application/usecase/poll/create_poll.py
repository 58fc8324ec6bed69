"""Create poll use case."""

from uuid import UUID

from pydantic import BaseModel

from ballot.domain.service import PollService
from ballot.domain.value import UserId

from .common import PollItem, PollResponse


class CreatePollRequest(BaseModel):
    """Create poll request."""

    user_id: str  # From authenticated user
    title: str
    description: str | None = None
    options: list[str]


class CreatePollUseCase:
    """Use case for creating a poll with its initial options."""

    def __init__(self, poll_service: PollService) -> None:
        """Initialize create poll use case.

        Args:
            poll_service: Poll domain service
        """
        self.poll_service = poll_service

    async def execute(self, request: CreatePollRequest) -> PollResponse:
        """Execute create poll flow.

        Args:
            request: Poll fields and the creator

        Returns:
            The created poll with zero votes

        Raises:
            InvalidInputError: If title, description or options break the rules
        """
        results = await self.poll_service.create_poll(
            user_id=UserId(UUID(request.user_id)),
            title=request.title,
            description=request.description,
            options=request.options,
        )
        return PollResponse(poll=PollItem.from_results(results))
