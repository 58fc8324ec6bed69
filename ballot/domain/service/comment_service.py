"""Comment domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from ballot.config import PollSettings
from ballot.domain.error import (
    ContentDeletedException,
    InactivePollError,
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
)
from ballot.domain.model.comment import Comment
from ballot.domain.repository import CommentRepository, PollRepository
from ballot.domain.value import CommentId, PollId, Role, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment creation, listing and the mutation guard."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        poll_repository: PollRepository,
        poll_settings: PollSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            poll_repository: Poll repository (to check the target poll)
            poll_settings: Comment length and listing limits
        """
        self.comment_repository = comment_repository
        self.poll_repository = poll_repository
        self.poll_settings = poll_settings

    def _validate_content(self, content: str) -> str:
        """Trim surrounding whitespace, then check the trimmed length.

        Content is stored trimmed, so padding never counts toward
        ``comment_max_length``.
        """
        content = content.strip()
        if not content:
            raise InvalidInputError("Comment content cannot be empty")
        if len(content) > self.poll_settings.comment_max_length:
            raise InvalidInputError(
                f"Comment must be at most {self.poll_settings.comment_max_length} characters"
            )
        return content

    async def create_comment(
        self,
        poll_id: Optional[PollId],
        user_id: UserId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a comment on a poll, the discussion board, or a reply.

        Args:
            poll_id: Poll ID, or None for the community discussion board
            user_id: Author
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            InvalidInputError: If content is blank or too long, or the parent is invalid
            NotFoundError: If the poll doesn't exist
            InactivePollError: If the poll no longer accepts comments
        """
        with logfire.span(
            "comment_service.create_comment",
            poll_id=str(poll_id) if poll_id else None,
            user_id=str(user_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            content = self._validate_content(content)

            if poll_id is not None:
                poll = await self.poll_repository.find_by_id(poll_id)
                if not poll:
                    raise NotFoundError("Poll", str(poll_id))
                if not poll.is_active:
                    logfire.warn("Comment on inactive poll", poll_id=str(poll_id))
                    raise InactivePollError(str(poll_id))

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent or parent.is_deleted:
                    logfire.warn("Parent comment not found", parent_id=str(parent_id))
                    raise InvalidInputError("Parent comment not found")
                if parent.poll_id != poll_id:
                    logfire.warn(
                        "Parent comment belongs to another poll",
                        parent_id=str(parent_id),
                        parent_poll_id=str(parent.poll_id),
                        target_poll_id=str(poll_id),
                    )
                    raise InvalidInputError(
                        "Parent comment does not belong to this poll"
                    )

            now = datetime.now()
            saved = await self.comment_repository.save(
                Comment(
                    id=CommentId(uuid4()),
                    poll_id=poll_id,
                    parent_id=parent_id,
                    content=content,
                    user_id=user_id,
                    created_at=now,
                    updated_at=now,
                )
            )
            if parent_id:
                await self.comment_repository.increment_reply_count(parent_id)

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                poll_id=str(poll_id) if poll_id else None,
                is_reply=parent_id is not None,
            )
            return saved

    async def get_comment(self, comment_id: CommentId) -> Optional[Comment]:
        """Get a comment by ID, including soft-deleted ones.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comments_for_poll(self, poll_id: Optional[PollId]) -> list[Comment]:
        """Get the live comments of a poll (or the discussion board), newest first."""
        with logfire.span(
            "comment_service.get_comments_for_poll",
            poll_id=str(poll_id) if poll_id else None,
        ):
            comments = await self.comment_repository.find_by_poll(poll_id)
            logfire.info(
                "Comments retrieved for poll",
                poll_id=str(poll_id) if poll_id else None,
                count=len(comments),
            )
            return comments

    async def get_recent_comments(self) -> list[Comment]:
        """Get the newest top-level comments across all polls."""
        with logfire.span("comment_service.get_recent_comments"):
            return await self.comment_repository.find_recent_roots(
                self.poll_settings.recent_comments_limit
            )

    async def edit_comment(
        self, comment_id: CommentId, user_id: UserId, content: str
    ) -> Comment:
        """Replace a comment's content.

        Checks run in order: existence, ownership, deletion, content.

        Args:
            comment_id: Comment ID
            user_id: Caller
            content: New content

        Returns:
            Updated comment, marked as edited

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the caller isn't the author
            ContentDeletedException: If the comment is soft-deleted
            InvalidInputError: If content is blank or too long
        """
        with logfire.span(
            "comment_service.edit_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                raise NotFoundError("Comment", str(comment_id))
            if comment.user_id != user_id:
                logfire.warn(
                    "Unauthorized comment edit attempt",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(user_id))
            if comment.is_deleted:
                raise ContentDeletedException("comment", str(comment_id))

            content = self._validate_content(content)

            updated = await self.comment_repository.update_content(comment_id, content)
            if updated is None:
                # Deleted between the read and the write
                raise ContentDeletedException("comment", str(comment_id))

            logfire.info(
                "Comment edited",
                comment_id=str(comment_id),
                content_length=len(content),
            )
            return updated

    async def delete_comment(
        self, comment_id: CommentId, user_id: UserId, role: Role
    ) -> Comment:
        """Soft-delete a comment.

        The author may delete their own comment; admins and moderators may
        delete any comment.

        Args:
            comment_id: Comment ID
            user_id: Caller
            role: Caller's role

        Returns:
            The comment as it was before deletion

        Raises:
            NotFoundError: If the comment doesn't exist or is already deleted
            NotAuthorizedError: If the caller is neither author nor elevated
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
            role=role.value,
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment or comment.is_deleted:
                raise NotFoundError("Comment", str(comment_id))
            if comment.user_id != user_id and not role.is_elevated:
                logfire.warn(
                    "Unauthorized comment delete attempt",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(user_id))

            if not await self.comment_repository.soft_delete(comment_id):
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                user_id=str(user_id),
                by_owner=comment.user_id == user_id,
            )
            return comment
