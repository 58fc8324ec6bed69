"""Unit tests for the authentication use cases."""

from uuid import uuid4

import pytest

from ballot.application.usecase.auth import (
    ClaimAdminRequest,
    ClaimAdminUseCase,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from ballot.domain.error import NotAuthorizedError
from ballot.domain.repository import AdminActionRepository
from ballot.domain.service import JWTService
from ballot.domain.value import AdminActionType, Role, UserId
from ballot.util.jwt import JWTError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestClaimAdminUseCase:
    """Tests for the operator-gated admin claim."""

    @pytest.mark.asyncio
    async def test_claim_with_operator_token(self, unit_env, operator_token):
        """A correct secret grants admin and is audited."""
        # Arrange
        use_case = await unit_env.get(ClaimAdminUseCase)
        audit_repo = await unit_env.get(AdminActionRepository)
        user_id = UserId(uuid4())

        # Act
        response = await use_case.execute(
            ClaimAdminRequest(user_id=str(user_id), operator_token=operator_token)
        )

        # Assert
        assert response.success
        assert response.role == Role.ADMIN
        actions = await audit_repo.find_by_target(user_id)
        assert [a.action_type for a in actions] == [AdminActionType.CLAIM_ADMIN]

    @pytest.mark.asyncio
    async def test_claim_with_wrong_token(self, unit_env):
        """A wrong secret is refused and nothing is audited."""
        # Arrange
        use_case = await unit_env.get(ClaimAdminUseCase)
        audit_repo = await unit_env.get(AdminActionRepository)
        user_id = UserId(uuid4())

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                ClaimAdminRequest(user_id=str(user_id), operator_token="wrong")
            )
        assert await audit_repo.find_by_target(user_id) == []


class TestGetCurrentUserUseCase:
    """Tests for resolving the signed-in user."""

    @pytest.mark.asyncio
    async def test_first_call_creates_profile(self, unit_env):
        """A valid token mirrors the identity and creates a default profile."""
        # Arrange
        use_case = await unit_env.get(GetCurrentUserUseCase)
        jwt_service = await unit_env.get(JWTService)
        user_id = uuid4()
        token = jwt_service.create_token(str(user_id), "ada@example.com")

        # Act
        response = await use_case.execute(GetCurrentUserRequest(token=token))

        # Assert
        assert response.id == str(user_id)
        assert response.email == "ada@example.com"
        assert response.role == Role.USER
        assert response.username is None

    @pytest.mark.asyncio
    async def test_invalid_token_raises(self, unit_env):
        """A garbage token is rejected."""
        # Arrange
        use_case = await unit_env.get(GetCurrentUserUseCase)

        # Act & Assert
        with pytest.raises(JWTError):
            await use_case.execute(GetCurrentUserRequest(token="garbage"))
