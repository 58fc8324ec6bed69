"""Get comment use case."""

from uuid import UUID

from pydantic import BaseModel

from ballot.application.usecase.base import parse_uuid
from ballot.domain.error import NotFoundError
from ballot.domain.service import CommentService, ProfileService, VoteService
from ballot.domain.value import CommentId, UserId

from .common import CommentItem, build_comment_items


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str
    user_id: str | None = None  # Authenticated viewer, if any


class GetCommentUseCase:
    """Use case for reading one live comment with its votes."""

    def __init__(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize get comment use case.

        Args:
            comment_service: Comment domain service
            vote_service: Vote service for tallies
            profile_service: Profile service for author fields
        """
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.profile_service = profile_service

    async def execute(self, request: GetCommentRequest) -> CommentItem:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist or is deleted
        """
        comment_uuid = parse_uuid(request.comment_id)
        comment = (
            await self.comment_service.get_comment(CommentId(comment_uuid))
            if comment_uuid
            else None
        )
        if not comment or comment.is_deleted:
            raise NotFoundError("Comment", request.comment_id)

        viewer_id = UserId(UUID(request.user_id)) if request.user_id else None
        items = await build_comment_items(
            [comment], self.vote_service, self.profile_service, viewer_id
        )
        return items[0]
