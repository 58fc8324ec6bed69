"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from ballot.application.usecase.base import parse_uuid
from ballot.domain.error import InvalidInputError, NotFoundError
from ballot.domain.service import CommentService, ProfileService, VoteService
from ballot.domain.value import CommentId, UserId

from .common import CommentItem, build_comment_items


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str
    user_id: str  # Current user ID (must be author)
    content: str | None = None


class UpdateCommentUseCase:
    """Use case for editing a comment's content (author only)."""

    def __init__(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            vote_service: Vote service for tallies
            profile_service: Profile service for author fields
        """
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.profile_service = profile_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the caller isn't the author
            ContentDeletedException: If the comment is deleted
            InvalidInputError: If content is missing, blank or too long
        """
        comment_uuid = parse_uuid(request.comment_id)
        if not comment_uuid:
            raise NotFoundError("Comment", request.comment_id)
        if request.content is None:
            raise InvalidInputError("Comment ID and content are required")

        user_id = UserId(UUID(request.user_id))
        updated = await self.comment_service.edit_comment(
            CommentId(comment_uuid), user_id, request.content
        )

        items = await build_comment_items(
            [updated], self.vote_service, self.profile_service, user_id
        )
        return items[0]
