"""Unit tests for VoteService."""

from datetime import datetime
from uuid import uuid4

import pytest

from ballot.config import PollSettings
from ballot.domain.error import InvalidInputError, NotFoundError
from ballot.domain.model.comment import Comment
from ballot.domain.model.poll import Poll
from ballot.domain.repository import (
    CommentRepository,
    CommentVoteRepository,
    PollRepository,
    VoteRepository,
)
from ballot.domain.service import VoteService
from ballot.domain.value import (
    CommentId,
    CommentVoteType,
    PollId,
    UserId,
    VoteAction,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def _save_poll(unit_env, is_active: bool = True) -> Poll:
    poll_repo = await unit_env.get(PollRepository)
    return await poll_repo.save(
        Poll(
            id=PollId(uuid4()),
            title="Favourite editor",
            is_active=is_active,
            user_id=UserId(uuid4()),
        )
    )


async def _save_comment(unit_env, is_deleted: bool = False) -> Comment:
    comment_repo = await unit_env.get(CommentRepository)
    now = datetime.now()
    return await comment_repo.save(
        Comment(
            id=CommentId(uuid4()),
            poll_id=None,
            content="First!",
            user_id=UserId(uuid4()),
            is_deleted=is_deleted,
            created_at=now,
            updated_at=now,
        )
    )


class TestCastVote:
    """Tests for cast_vote method."""

    @pytest.mark.asyncio
    async def test_first_vote_creates_option_and_vote(self, unit_env):
        """Voting for unknown text should create the option and one vote."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        poll = await _save_poll(unit_env)
        user_id = UserId(uuid4())

        # Act
        option = await vote_service.cast_vote(poll.id, user_id, "Python")

        # Assert
        assert option.text == "Python"
        assert option.poll_id == poll.id
        vote = await vote_repo.find_by_poll_and_user(poll.id, user_id)
        assert vote is not None
        assert vote.option_id == option.id

    @pytest.mark.asyncio
    async def test_revote_moves_single_vote(self, unit_env):
        """Voting again should move the vote, never add a second one."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        poll = await _save_poll(unit_env)
        user_id = UserId(uuid4())

        # Act
        first = await vote_service.cast_vote(poll.id, user_id, "Python")
        await vote_service.cast_vote(poll.id, user_id, "Rust")
        last = await vote_service.cast_vote(poll.id, user_id, "Go")

        # Assert
        counts = await vote_repo.count_by_option(poll.id)
        assert counts == {last.id: 1}
        assert first.id not in counts

    @pytest.mark.asyncio
    async def test_same_choice_twice_keeps_one_vote(self, unit_env):
        """Repeating the same choice should leave exactly one vote."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        poll = await _save_poll(unit_env)
        user_id = UserId(uuid4())

        # Act
        first = await vote_service.cast_vote(poll.id, user_id, "Python")
        second = await vote_service.cast_vote(poll.id, user_id, "Python")

        # Assert
        assert first.id == second.id
        assert await vote_repo.count_by_option(poll.id) == {first.id: 1}

    @pytest.mark.asyncio
    async def test_option_text_is_trimmed(self, unit_env):
        """Surrounding whitespace should resolve to the same option."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        poll = await _save_poll(unit_env)

        # Act
        a = await vote_service.cast_vote(poll.id, UserId(uuid4()), "Python")
        b = await vote_service.cast_vote(poll.id, UserId(uuid4()), "  Python ")

        # Assert
        assert a.id == b.id

    @pytest.mark.asyncio
    async def test_inactive_poll_raises_not_found(self, unit_env):
        """Voting on an inactive poll should be rejected as not found."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        poll = await _save_poll(unit_env, is_active=False)
        user_id = UserId(uuid4())

        # Act & Assert
        with pytest.raises(NotFoundError):
            await vote_service.cast_vote(poll.id, user_id, "Python")
        assert await vote_repo.find_by_poll_and_user(poll.id, user_id) is None

    @pytest.mark.asyncio
    async def test_unknown_poll_raises_not_found(self, unit_env):
        """Voting on a poll that doesn't exist should raise NotFoundError."""
        # Arrange
        vote_service = await unit_env.get(VoteService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await vote_service.cast_vote(PollId(uuid4()), UserId(uuid4()), "Python")

    @pytest.mark.asyncio
    async def test_bootstrap_poll_created_on_first_vote(self, unit_env):
        """The well-known poll should be created when first voted on."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        poll_repo = await unit_env.get(PollRepository)
        settings = await unit_env.get(PollSettings)
        poll_id = PollId(settings.bootstrap_poll_id)
        user_id = UserId(uuid4())

        # Act
        await vote_service.cast_vote(poll_id, user_id, "Python")

        # Assert
        poll = await poll_repo.find_by_id(poll_id)
        assert poll is not None
        assert poll.title == settings.bootstrap_poll_title
        assert poll.user_id == user_id
        assert poll.is_active

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "x" * 201])
    async def test_invalid_option_text_raises_error(self, unit_env, text):
        """Blank or oversized option text should be rejected."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        poll = await _save_poll(unit_env)

        # Act & Assert
        with pytest.raises(InvalidInputError):
            await vote_service.cast_vote(poll.id, UserId(uuid4()), text)


class TestCastCommentVote:
    """Tests for cast_comment_vote method."""

    @pytest.mark.asyncio
    async def test_first_vote_is_created(self, unit_env):
        """A first upvote should be created and counted."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment = await _save_comment(unit_env)
        user_id = UserId(uuid4())

        # Act
        action, tally = await vote_service.cast_comment_vote(comment.id, user_id, 1)

        # Assert
        assert action == VoteAction.CREATED
        assert tally.upvotes == 1
        assert tally.downvotes == 0
        assert tally.user_vote == CommentVoteType.UP

    @pytest.mark.asyncio
    async def test_same_vote_twice_removes_it(self, unit_env):
        """Repeating the same direction should cancel the vote."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment_vote_repo = await unit_env.get(CommentVoteRepository)
        comment = await _save_comment(unit_env)
        user_id = UserId(uuid4())

        # Act
        await vote_service.cast_comment_vote(comment.id, user_id, 1)
        action, tally = await vote_service.cast_comment_vote(comment.id, user_id, 1)

        # Assert
        assert action == VoteAction.REMOVED
        assert tally.upvotes == 0
        assert tally.user_vote is None
        assert (
            await comment_vote_repo.find_by_comment_and_user(comment.id, user_id)
            is None
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("calls", [1, 2, 3, 4, 5])
    async def test_repeated_vote_parity(self, unit_env, calls):
        """Odd repeats leave one vote of that type, even repeats leave none."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment_vote_repo = await unit_env.get(CommentVoteRepository)
        comment = await _save_comment(unit_env)
        user_id = UserId(uuid4())

        # Act
        for _ in range(calls):
            await vote_service.cast_comment_vote(comment.id, user_id, -1)

        # Assert
        vote = await comment_vote_repo.find_by_comment_and_user(comment.id, user_id)
        if calls % 2:
            assert vote is not None
            assert vote.vote_type == CommentVoteType.DOWN
        else:
            assert vote is None

    @pytest.mark.asyncio
    async def test_opposite_vote_flips_direction(self, unit_env):
        """Alternating directions should leave one vote of the last direction."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment_vote_repo = await unit_env.get(CommentVoteRepository)
        comment = await _save_comment(unit_env)
        user_id = UserId(uuid4())

        # Act
        await vote_service.cast_comment_vote(comment.id, user_id, 1)
        action, tally = await vote_service.cast_comment_vote(comment.id, user_id, -1)

        # Assert
        assert action == VoteAction.UPDATED
        assert (tally.upvotes, tally.downvotes) == (0, 1)
        vote = await comment_vote_repo.find_by_comment_and_user(comment.id, user_id)
        assert vote.vote_type == CommentVoteType.DOWN

    @pytest.mark.asyncio
    async def test_remove_then_opposite_creates(self, unit_env):
        """After a cancelled upvote, a downvote should be a fresh vote."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment = await _save_comment(unit_env)
        user_id = UserId(uuid4())

        # Act
        await vote_service.cast_comment_vote(comment.id, user_id, 1)
        removed, _ = await vote_service.cast_comment_vote(comment.id, user_id, 1)
        created, tally = await vote_service.cast_comment_vote(comment.id, user_id, -1)

        # Assert
        assert removed == VoteAction.REMOVED
        assert created == VoteAction.CREATED
        assert tally.downvotes == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("vote_type", [0, 2, -2])
    async def test_invalid_vote_type_raises_error(self, unit_env, vote_type):
        """Only 1 and -1 should be accepted."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment = await _save_comment(unit_env)

        # Act & Assert
        with pytest.raises(InvalidInputError, match="Invalid vote type"):
            await vote_service.cast_comment_vote(comment.id, UserId(uuid4()), vote_type)

    @pytest.mark.asyncio
    async def test_deleted_comment_raises_not_found(self, unit_env):
        """Voting on a deleted comment should raise NotFoundError."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment = await _save_comment(unit_env, is_deleted=True)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await vote_service.cast_comment_vote(comment.id, UserId(uuid4()), 1)

    @pytest.mark.asyncio
    async def test_tallies_count_all_voters(self, unit_env):
        """Tallies should count every voter and show only the caller's vote."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment = await _save_comment(unit_env)
        alice, bob, carol = UserId(uuid4()), UserId(uuid4()), UserId(uuid4())
        await vote_service.cast_comment_vote(comment.id, alice, 1)
        await vote_service.cast_comment_vote(comment.id, bob, 1)
        await vote_service.cast_comment_vote(comment.id, carol, -1)

        # Act
        anonymous = await vote_service.get_tallies([comment.id])
        as_carol = await vote_service.get_tallies([comment.id], carol)

        # Assert
        assert anonymous[comment.id].upvotes == 2
        assert anonymous[comment.id].downvotes == 1
        assert anonymous[comment.id].user_vote is None
        assert as_carol[comment.id].user_vote == CommentVoteType.DOWN
