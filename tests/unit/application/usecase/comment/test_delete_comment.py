"""Unit tests for DeleteCommentUseCase."""

from uuid import uuid4

import pytest

from ballot.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from ballot.domain.error import NotAuthorizedError, NotFoundError
from ballot.domain.model.user import Profile
from ballot.domain.repository import AdminActionRepository, ProfileRepository
from ballot.domain.service import CommentService
from ballot.domain.value import AdminActionType, Role, TargetType, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    """Tests for comment deletion and its audit trail."""

    @pytest.mark.asyncio
    async def test_author_delete_is_not_audited(self, unit_env):
        """Authors deleting their own comment leave no audit record."""
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        audit_repo = await unit_env.get(AdminActionRepository)
        author = UserId(uuid4())
        comment = await comment_service.create_comment(None, author, "Mine")

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(comment_id=str(comment.id), user_id=str(author))
        )

        # Assert
        assert response.success
        assert await audit_repo.find_by_target(comment.id) == []

    @pytest.mark.asyncio
    async def test_moderator_delete_is_audited(self, unit_env):
        """A moderator removing someone else's comment is recorded."""
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        profile_repo = await unit_env.get(ProfileRepository)
        audit_repo = await unit_env.get(AdminActionRepository)
        moderator = UserId(uuid4())
        await profile_repo.save(Profile(user_id=moderator, role=Role.MODERATOR))
        author = UserId(uuid4())
        comment = await comment_service.create_comment(None, author, "Spam")

        # Act
        await use_case.execute(
            DeleteCommentRequest(comment_id=str(comment.id), user_id=str(moderator))
        )

        # Assert
        actions = await audit_repo.find_by_target(comment.id)
        assert len(actions) == 1
        assert actions[0].admin_id == moderator
        assert actions[0].action_type == AdminActionType.DELETE_COMMENT
        assert actions[0].target_type == TargetType.COMMENT
        assert actions[0].action_details["comment_author"] == str(author)

    @pytest.mark.asyncio
    async def test_plain_user_cannot_delete_others(self, unit_env):
        """A plain user is forbidden from deleting another user's comment."""
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(None, UserId(uuid4()), "Hi")

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(
                    comment_id=str(comment.id), user_id=str(uuid4())
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_id_is_not_found(self, unit_env):
        """A malformed comment ID is reported as not found."""
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteCommentRequest(comment_id="not-a-uuid", user_id=str(uuid4()))
            )
