"""Unit tests for PollService and option ranking."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from ballot.domain.error import InvalidInputError, NotAuthorizedError, NotFoundError
from ballot.domain.model.poll import Option
from ballot.domain.repository import PollRepository
from ballot.domain.service import PollService, VoteService, rank_options
from ballot.domain.value import OptionId, PollId, Role, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRankOptions:
    """Tests for rank_options."""

    def test_orders_by_count_and_keeps_creation_order_on_ties(self):
        """Higher counts first; equal counts keep their original order."""
        # Arrange
        poll_id = PollId(uuid4())
        start = datetime(2024, 1, 1)
        options = [
            Option(
                id=OptionId(uuid4()),
                poll_id=poll_id,
                text=text,
                created_at=start + timedelta(minutes=i),
            )
            for i, text in enumerate(["A", "B", "C", "D"])
        ]
        counts = {options[1].id: 3, options[2].id: 1, options[3].id: 3}

        # Act
        ranked, total = rank_options(options, counts)

        # Assert
        assert [r.option.text for r in ranked] == ["B", "D", "C", "A"]
        assert [r.vote_count for r in ranked] == [3, 3, 1, 0]
        assert total == 7

    def test_no_options(self):
        """An empty poll ranks to nothing."""
        assert rank_options([], {}) == ([], 0)


class TestCreatePoll:
    """Tests for create_poll method."""

    @pytest.mark.asyncio
    async def test_create_poll_with_options(self, unit_env):
        """Poll should be created active, owned and with zero-vote options."""
        # Arrange
        poll_service = await unit_env.get(PollService)
        user_id = UserId(uuid4())

        # Act
        results = await poll_service.create_poll(
            user_id, "  Best language?  ", "  ", ["Python", " Rust "]
        )

        # Assert
        assert results.poll.title == "Best language?"
        assert results.poll.description is None
        assert results.poll.user_id == user_id
        assert results.poll.is_active
        assert [r.option.text for r in results.options] == ["Python", "Rust"]
        assert results.total_votes == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "title,options,message",
        [
            ("Tiny", ["a", "b"], "Title"),
            ("x" * 201, ["a", "b"], "Title"),
            ("Good title", ["only one"], "options"),
            ("Good title", [str(i) for i in range(11)], "options"),
            ("Good title", ["a", "  "], "non-empty"),
            ("Good title", ["a", "a"], "unique"),
            ("Good title", ["a", "x" * 201], "at most"),
        ],
    )
    async def test_invalid_poll_is_rejected(self, unit_env, title, options, message):
        """Title length, option count, blanks, duplicates and length are enforced."""
        # Arrange
        poll_service = await unit_env.get(PollService)

        # Act & Assert
        with pytest.raises(InvalidInputError, match=message):
            await poll_service.create_poll(UserId(uuid4()), title, None, options)

    @pytest.mark.asyncio
    async def test_long_description_is_rejected(self, unit_env):
        """Descriptions over 1000 characters should be rejected."""
        # Arrange
        poll_service = await unit_env.get(PollService)

        # Act & Assert
        with pytest.raises(InvalidInputError, match="Description"):
            await poll_service.create_poll(
                UserId(uuid4()), "Good title", "x" * 1001, ["a", "b"]
            )


class TestResults:
    """Tests for get_results method."""

    @pytest.mark.asyncio
    async def test_results_rank_by_votes(self, unit_env):
        """Results should count votes per option, most voted first."""
        # Arrange
        poll_service = await unit_env.get(PollService)
        vote_service = await unit_env.get(VoteService)
        created = await poll_service.create_poll(
            UserId(uuid4()), "Best language?", None, ["Python", "Rust", "Go"]
        )
        poll = created.poll
        await vote_service.cast_vote(poll.id, UserId(uuid4()), "Go")
        await vote_service.cast_vote(poll.id, UserId(uuid4()), "Go")
        await vote_service.cast_vote(poll.id, UserId(uuid4()), "Rust")

        # Act
        results = await poll_service.get_results(poll)

        # Assert
        assert [(r.option.text, r.vote_count) for r in results.options] == [
            ("Go", 2),
            ("Rust", 1),
            ("Python", 0),
        ]
        assert results.total_votes == 3


class TestManagePoll:
    """Tests for update_poll and delete_poll methods."""

    @pytest.mark.asyncio
    async def test_owner_can_close_poll(self, unit_env):
        """The creator should be able to deactivate the poll."""
        # Arrange
        poll_service = await unit_env.get(PollService)
        owner = UserId(uuid4())
        created = await poll_service.create_poll(owner, "Close me", None, ["a", "b"])

        # Act
        before, after = await poll_service.update_poll(
            created.poll.id, owner, Role.USER, is_active=False
        )

        # Assert
        assert before.is_active
        assert not after.is_active
        assert after.title == "Close me"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", [Role.USER, Role.MODERATOR])
    async def test_non_owner_cannot_update(self, unit_env, role):
        """Only the creator or an admin may update a poll."""
        # Arrange
        poll_service = await unit_env.get(PollService)
        created = await poll_service.create_poll(
            UserId(uuid4()), "Hands off", None, ["a", "b"]
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await poll_service.update_poll(
                created.poll.id, UserId(uuid4()), role, title="Mine now"
            )

    @pytest.mark.asyncio
    async def test_admin_can_update_any_poll(self, unit_env):
        """Admins may update polls they don't own."""
        # Arrange
        poll_service = await unit_env.get(PollService)
        created = await poll_service.create_poll(
            UserId(uuid4()), "Old title", "Old", ["a", "b"]
        )

        # Act
        _, after = await poll_service.update_poll(
            created.poll.id, UserId(uuid4()), Role.ADMIN, title="New title", description=""
        )

        # Assert
        assert after.title == "New title"
        assert after.description is None

    @pytest.mark.asyncio
    async def test_delete_poll(self, unit_env):
        """Deleted polls should no longer be found."""
        # Arrange
        poll_service = await unit_env.get(PollService)
        poll_repo = await unit_env.get(PollRepository)
        owner = UserId(uuid4())
        created = await poll_service.create_poll(owner, "Delete me", None, ["a", "b"])

        # Act
        await poll_service.delete_poll(created.poll.id, owner, Role.USER)

        # Assert
        assert await poll_repo.find_by_id(created.poll.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_poll_raises_not_found(self, unit_env):
        """Deleting an unknown poll should raise NotFoundError."""
        # Arrange
        poll_service = await unit_env.get(PollService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await poll_service.delete_poll(PollId(uuid4()), UserId(uuid4()), Role.ADMIN)
