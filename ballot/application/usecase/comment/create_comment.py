"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from ballot.application.usecase.base import parse_uuid
from ballot.domain.error import InvalidInputError
from ballot.domain.service import CommentService, ProfileService, VoteService
from ballot.domain.value import CommentId, PollId, UserId

from .common import CommentItem, build_comment_items

COMMUNITY_DISCUSSION = "community-discussion"


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    user_id: str  # From authenticated user
    poll_id: str | None = None  # Poll UUID or "community-discussion"
    content: str | None = None
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentUseCase:
    """Use case for commenting on a poll, the discussion board, or replying."""

    def __init__(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            vote_service: Vote service (tally of the new comment)
            profile_service: Profile service (author fields)
        """
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.profile_service = profile_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            InvalidInputError: If fields are missing or malformed, or the parent is invalid
            NotFoundError: If the poll doesn't exist
            InactivePollError: If the poll no longer accepts comments
        """
        if not request.poll_id or request.content is None:
            raise InvalidInputError("Poll ID and content are required")

        poll_id: PollId | None = None
        if request.poll_id != COMMUNITY_DISCUSSION:
            poll_uuid = parse_uuid(request.poll_id)
            if not poll_uuid:
                raise InvalidInputError(f"Invalid pollId: {request.poll_id}")
            poll_id = PollId(poll_uuid)

        parent_id: CommentId | None = None
        if request.parent_id:
            parent_uuid = parse_uuid(request.parent_id)
            if not parent_uuid:
                raise InvalidInputError(f"Invalid parentId: {request.parent_id}")
            parent_id = CommentId(parent_uuid)

        user_id = UserId(UUID(request.user_id))
        comment = await self.comment_service.create_comment(
            poll_id=poll_id,
            user_id=user_id,
            content=request.content,
            parent_id=parent_id,
        )

        items = await build_comment_items(
            [comment], self.vote_service, self.profile_service, user_id
        )
        return items[0]
