"""Poll routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from ballot.application.usecase.poll import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    CreatePollRequest,
    CreatePollUseCase,
    DeletePollRequest,
    DeletePollResponse,
    DeletePollUseCase,
    GetPollRequest,
    GetPollUseCase,
    ListPollsResponse,
    ListPollsUseCase,
    PollResponse,
    UpdatePollRequest,
    UpdatePollUseCase,
)
from ballot.domain.error import DomainError
from ballot.domain.service import JWTService
from ballot.interface.api.credentials import get_auth_token, require_user_id
from ballot.interface.api.errors import to_http_exception

router = APIRouter(prefix="/api/polls", tags=["polls"], route_class=DishkaRoute)


class CreatePollAPIRequest(BaseModel):
    """API request for creating a poll."""

    title: str | None = None
    description: str | None = None
    options: list[str] | None = None


class UpdatePollAPIRequest(BaseModel):
    """API request for updating a poll. Omitted fields are left unchanged."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    description: str | None = None
    is_active: bool | None = Field(default=None, alias="isActive")


class CastVoteAPIRequest(BaseModel):
    """API request for voting on a poll."""

    model_config = ConfigDict(populate_by_name=True)

    poll_id: str | None = Field(default=None, alias="pollId")
    option_text: str | None = Field(default=None, alias="optionText")


@router.get("", response_model=ListPollsResponse)
async def list_polls(
    list_polls_use_case: FromDishka[ListPollsUseCase],
) -> ListPollsResponse:
    """List all polls with ranked options, newest first."""
    return await list_polls_use_case.execute()


@router.post("", response_model=PollResponse, status_code=status.HTTP_201_CREATED)
async def create_poll(
    request: CreatePollAPIRequest,
    create_poll_use_case: FromDishka[CreatePollUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> PollResponse:
    """Create a poll with 2-10 options.

    Requires authentication.

    Raises:
        HTTPException: 401 without a session, 400 on invalid fields
    """
    user_id = require_user_id(jwt_service, auth_token, "create polls")
    if request.title is None or request.options is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Title and options are required",
        )

    try:
        return await create_poll_use_case.execute(
            CreatePollRequest(
                user_id=user_id,
                title=request.title,
                description=request.description,
                options=request.options,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/vote", response_model=CastVoteResponse)
async def cast_vote(
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> CastVoteResponse:
    """Cast or move the caller's vote on a poll.

    Unknown option text creates the option on the fly. Voting again
    replaces the previous choice.

    Raises:
        HTTPException: 401 without a session, 400 on missing fields,
            404 if the poll is missing or closed
    """
    user_id = require_user_id(jwt_service, auth_token, "vote")

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                user_id=user_id,
                poll_id=request.poll_id,
                option_text=request.option_text,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{poll_id}", response_model=PollResponse)
async def get_poll(
    poll_id: str,
    get_poll_use_case: FromDishka[GetPollUseCase],
) -> PollResponse:
    """Get a poll with options ranked by votes.

    Raises:
        HTTPException: 404 if the poll doesn't exist
    """
    try:
        return await get_poll_use_case.execute(GetPollRequest(poll_id=poll_id))
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/{poll_id}", response_model=PollResponse)
async def update_poll(
    poll_id: str,
    request: UpdatePollAPIRequest,
    update_poll_use_case: FromDishka[UpdatePollUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> PollResponse:
    """Update poll title, description or active flag.

    Only the creator or an admin may update.

    Raises:
        HTTPException: 401, 403, 404 or 400
    """
    user_id = require_user_id(jwt_service, auth_token, "update polls")

    try:
        return await update_poll_use_case.execute(
            UpdatePollRequest(
                poll_id=poll_id,
                user_id=user_id,
                title=request.title,
                description=request.description,
                is_active=request.is_active,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{poll_id}", response_model=DeletePollResponse)
async def delete_poll(
    poll_id: str,
    delete_poll_use_case: FromDishka[DeletePollUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> DeletePollResponse:
    """Delete a poll with its options, votes and comments.

    Only the creator or an admin may delete.

    Raises:
        HTTPException: 401, 403 or 404
    """
    user_id = require_user_id(jwt_service, auth_token, "delete polls")

    try:
        return await delete_poll_use_case.execute(
            DeletePollRequest(poll_id=poll_id, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
