"""List comments use case."""

from uuid import UUID

from pydantic import BaseModel

from ballot.application.usecase.base import parse_uuid
from ballot.domain.error import InvalidInputError
from ballot.domain.service import CommentService, ProfileService, VoteService
from ballot.domain.value import PollId, UserId

from .common import CommentItem, build_comment_items
from .create_comment import COMMUNITY_DISCUSSION


class ListCommentsRequest(BaseModel):
    """List comments request."""

    poll_id: str | None = None  # Poll UUID or "community-discussion"
    recent: bool = False
    user_id: str | None = None  # Authenticated viewer, if any


class ListCommentsResponse(BaseModel):
    """List comments response."""

    comments: list[CommentItem]


class ListCommentsUseCase:
    """Use case for listing the comments of a poll, or the most recent ones."""

    def __init__(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            vote_service: Vote service for tallies
            profile_service: Profile service for author fields
        """
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.profile_service = profile_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        ``recent`` takes precedence over ``poll_id``.

        Raises:
            InvalidInputError: If neither a poll nor ``recent`` is given, or
                the poll ID is malformed
        """
        if request.recent:
            comments = await self.comment_service.get_recent_comments()
        elif request.poll_id == COMMUNITY_DISCUSSION:
            comments = await self.comment_service.get_comments_for_poll(None)
        elif request.poll_id:
            poll_uuid = parse_uuid(request.poll_id)
            if not poll_uuid:
                raise InvalidInputError(f"Invalid pollId: {request.poll_id}")
            comments = await self.comment_service.get_comments_for_poll(
                PollId(poll_uuid)
            )
        else:
            raise InvalidInputError("Poll ID is required")

        viewer_id = UserId(UUID(request.user_id)) if request.user_id else None
        items = await build_comment_items(
            comments, self.vote_service, self.profile_service, viewer_id
        )
        return ListCommentsResponse(comments=items)
