"""Unit tests for the update profile use case."""

from uuid import uuid4

import pytest

from ballot.application.usecase.user import UpdateProfileRequest, UpdateProfileUseCase
from ballot.domain.error import InvalidInputError
from ballot.domain.value import Role
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_update_profile_creates_profile_on_first_use(unit_env):
    """First update creates a default-role profile with the new values."""
    use_case = await unit_env.get(UpdateProfileUseCase)
    user_id = str(uuid4())

    response = await use_case.execute(
        UpdateProfileRequest(
            user_id=user_id, username="ada_l", display_name="  Ada Lovelace  "
        )
    )

    assert response.user_id == user_id
    assert response.username == "ada_l"
    assert response.display_name == "Ada Lovelace"
    assert response.role == Role.USER


@pytest.mark.asyncio
async def test_update_profile_keeps_untouched_fields(unit_env):
    use_case = await unit_env.get(UpdateProfileUseCase)
    user_id = str(uuid4())
    await use_case.execute(UpdateProfileRequest(user_id=user_id, username="grace"))

    response = await use_case.execute(
        UpdateProfileRequest(user_id=user_id, display_name="Grace H")
    )

    assert response.username == "grace"
    assert response.display_name == "Grace H"


@pytest.mark.asyncio
async def test_update_profile_rejects_taken_username(unit_env):
    use_case = await unit_env.get(UpdateProfileUseCase)
    await use_case.execute(
        UpdateProfileRequest(user_id=str(uuid4()), username="taken_name")
    )

    with pytest.raises(InvalidInputError, match="already taken"):
        await use_case.execute(
            UpdateProfileRequest(user_id=str(uuid4()), username="taken_name")
        )
