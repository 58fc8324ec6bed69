"""Unit tests for CastVoteUseCase."""

from uuid import uuid4

import pytest

from ballot.application.usecase.poll import CastVoteRequest, CastVoteUseCase
from ballot.domain.error import InvalidInputError
from ballot.domain.service import PollService
from ballot.domain.value import UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCastVoteUseCase:
    """Tests for request handling around poll votes."""

    @pytest.mark.asyncio
    async def test_vote_returns_option(self, unit_env):
        """A valid vote should echo the chosen option."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        poll_service = await unit_env.get(PollService)
        created = await poll_service.create_poll(
            UserId(uuid4()), "Best pet?", None, ["Cat", "Dog"]
        )

        # Act
        response = await use_case.execute(
            CastVoteRequest(
                user_id=str(uuid4()), poll_id=str(created.poll.id), option_text="Dog"
            )
        )

        # Assert
        assert response.success
        assert response.message == "Vote recorded successfully"
        assert response.option.text == "Dog"
        assert response.option.poll_id == str(created.poll.id)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "poll_id,option_text",
        [(None, "Dog"), (str(uuid4()), None), ("not-a-uuid", "Dog")],
    )
    async def test_missing_or_malformed_fields(self, unit_env, poll_id, option_text):
        """Missing fields and malformed IDs are invalid input."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)

        # Act & Assert
        with pytest.raises(InvalidInputError):
            await use_case.execute(
                CastVoteRequest(
                    user_id=str(uuid4()), poll_id=poll_id, option_text=option_text
                )
            )
