"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ballot.domain.model.comment import Comment
from ballot.domain.value import CommentId, PollId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Comments are never hard-deleted through this interface.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, including soft-deleted ones.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_poll(
        self, poll_id: Optional[PollId], include_deleted: bool = False
    ) -> List[Comment]:
        """Find the comments of a poll, newest first.

        Args:
            poll_id: The poll's ID, or None for the community discussion board
            include_deleted: Whether to include soft-deleted comments

        Returns:
            Comments on the poll
        """
        pass

    @abstractmethod
    async def find_recent_roots(self, limit: int) -> List[Comment]:
        """Find the newest non-deleted top-level comments across all polls.

        Args:
            limit: Maximum number of comments

        Returns:
            Comments, newest first
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a live comment and mark it edited.

        Args:
            comment_id: The comment's ID
            content: New content

        Returns:
            Updated comment, or None if it doesn't exist or is deleted
        """
        pass

    @abstractmethod
    async def soft_delete(self, comment_id: CommentId) -> bool:
        """Flag a live comment as deleted.

        Args:
            comment_id: The comment's ID

        Returns:
            True if the comment was live and is now deleted
        """
        pass

    @abstractmethod
    async def increment_reply_count(self, comment_id: CommentId) -> None:
        """Atomically increment the reply counter of a comment.

        Args:
            comment_id: The parent comment's ID
        """
        pass
