"""In-memory comment repository for testing."""

from datetime import datetime
from typing import List, Optional

from ballot.domain.model.comment import Comment
from ballot.domain.repository.comment import CommentRepository
from ballot.domain.value import CommentId, PollId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_poll(
        self, poll_id: Optional[PollId], include_deleted: bool = False
    ) -> List[Comment]:
        """Find the comments of a poll, newest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.poll_id == poll_id and (include_deleted or not c.is_deleted)
        ]
        return sorted(comments, key=lambda c: c.created_at, reverse=True)

    async def find_recent_roots(self, limit: int) -> List[Comment]:
        """Find the newest non-deleted top-level comments."""
        roots = [
            c
            for c in self._comments.values()
            if c.parent_id is None and not c.is_deleted
        ]
        return sorted(roots, key=lambda c: c.created_at, reverse=True)[:limit]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a live comment and mark it edited."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None

        updated = comment.model_copy(
            update={"content": content, "is_edited": True, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated

    async def soft_delete(self, comment_id: CommentId) -> bool:
        """Flag a live comment as deleted."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return False

        self._comments[comment_id] = comment.model_copy(
            update={"is_deleted": True, "updated_at": datetime.now()}
        )
        return True

    async def increment_reply_count(self, comment_id: CommentId) -> None:
        """Increment reply_count by 1."""
        comment = self._comments.get(comment_id)
        if comment:
            self._comments[comment_id] = comment.model_copy(
                update={"reply_count": comment.reply_count + 1}
            )
