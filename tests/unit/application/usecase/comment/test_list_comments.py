"""Unit tests for ListCommentsUseCase."""

from uuid import uuid4

import pytest

from ballot.application.usecase.comment import (
    ListCommentsRequest,
    ListCommentsUseCase,
)
from ballot.domain.error import InvalidInputError
from ballot.domain.model.poll import Poll
from ballot.domain.repository import PollRepository
from ballot.domain.service import CommentService, ProfileService, VoteService
from ballot.domain.value import PollId, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListCommentsUseCase:
    """Tests for listing comments with authors and votes."""

    @pytest.mark.asyncio
    async def test_lists_poll_comments_with_votes_and_author(self, unit_env):
        """Items should carry the author's profile and the viewer's vote."""
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)
        comment_service = await unit_env.get(CommentService)
        vote_service = await unit_env.get(VoteService)
        profile_service = await unit_env.get(ProfileService)
        poll_repo = await unit_env.get(PollRepository)
        poll = await poll_repo.save(Poll(id=PollId(uuid4()), title="Cats or dogs"))
        author = UserId(uuid4())
        viewer = UserId(uuid4())
        await profile_service.update_profile(author, username="catfan")
        comment = await comment_service.create_comment(poll.id, author, "Cats")
        await vote_service.cast_comment_vote(comment.id, viewer, 1)

        # Act
        response = await use_case.execute(
            ListCommentsRequest(poll_id=str(poll.id), user_id=str(viewer))
        )

        # Assert
        assert len(response.comments) == 1
        item = response.comments[0]
        assert item.id == str(comment.id)
        assert item.author.username == "catfan"
        assert item.votes.upvotes == 1
        assert item.votes.user_vote == 1

    @pytest.mark.asyncio
    async def test_community_board(self, unit_env):
        """The board slug lists comments without a poll."""
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(None, UserId(uuid4()), "Hey")

        # Act
        response = await use_case.execute(
            ListCommentsRequest(poll_id="community-discussion")
        )

        # Assert
        assert [c.id for c in response.comments] == [str(comment.id)]
        assert response.comments[0].author is None
        assert response.comments[0].votes.user_vote is None

    @pytest.mark.asyncio
    async def test_requires_poll_or_recent(self, unit_env):
        """Listing without a poll or ``recent`` is invalid."""
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)

        # Act & Assert
        with pytest.raises(InvalidInputError):
            await use_case.execute(ListCommentsRequest())

    @pytest.mark.asyncio
    async def test_malformed_poll_id_is_invalid(self, unit_env):
        """A malformed poll ID is invalid input."""
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)

        # Act & Assert
        with pytest.raises(InvalidInputError, match="Invalid pollId"):
            await use_case.execute(ListCommentsRequest(poll_id="abc"))
