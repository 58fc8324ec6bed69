"""Comment routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, ConfigDict, Field

from ballot.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
    VoteCommentRequest,
    VoteCommentResponse,
    VoteCommentUseCase,
)
from ballot.domain.error import DomainError
from ballot.domain.service import JWTService
from ballot.interface.api.credentials import get_auth_token, require_user_id
from ballot.interface.api.errors import to_http_exception

router = APIRouter(prefix="/api/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    model_config = ConfigDict(populate_by_name=True)

    poll_id: str | None = Field(default=None, alias="pollId")
    content: str | None = None
    parent_id: str | None = Field(default=None, alias="parentId")


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str | None = None


class VoteCommentAPIRequest(BaseModel):
    """API request for voting on a comment."""

    model_config = ConfigDict(populate_by_name=True)

    vote_type: Any = Field(default=None, alias="voteType")


@router.get("", response_model=ListCommentsResponse)
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    poll_id: str | None = Query(default=None, alias="pollId"),
    recent: bool = False,
    auth_token: str | None = Depends(get_auth_token),
) -> ListCommentsResponse:
    """List the comments of a poll, or the most recent root comments.

    If authenticated, includes the caller's vote on each comment.

    Raises:
        HTTPException: 400 without ``pollId`` or ``recent=true``
    """
    try:
        return await list_comments_use_case.execute(
            ListCommentsRequest(
                poll_id=poll_id,
                recent=recent,
                user_id=jwt_service.get_user_id_from_token(auth_token),
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("", response_model=CommentItem, status_code=status.HTTP_201_CREATED)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> CommentItem:
    """Comment on a poll or the discussion board, or reply to a comment.

    Requires authentication.

    Raises:
        HTTPException: 401, 400, 403 (poll closed) or 404 (poll missing)
    """
    user_id = require_user_id(jwt_service, auth_token, "create comments")

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                user_id=user_id,
                poll_id=request.poll_id,
                content=request.content,
                parent_id=request.parent_id,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{comment_id}", response_model=CommentItem)
async def get_comment(
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> CommentItem:
    """Get one comment with its votes.

    Raises:
        HTTPException: 404 if missing or deleted
    """
    try:
        return await get_comment_use_case.execute(
            GetCommentRequest(
                comment_id=comment_id,
                user_id=jwt_service.get_user_id_from_token(auth_token),
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> CommentItem:
    """Edit a comment's content. Only the author can edit.

    Raises:
        HTTPException: 401, 403 (not author), 400 (deleted or invalid), 404
    """
    user_id = require_user_id(jwt_service, auth_token, "edit comments")

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=comment_id, user_id=user_id, content=request.content
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> DeleteCommentResponse:
    """Soft-delete a comment. Authors, moderators and admins may delete.

    Raises:
        HTTPException: 401, 403 or 404 (missing or already deleted)
    """
    user_id = require_user_id(jwt_service, auth_token, "delete comments")

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/{comment_id}/vote", response_model=VoteCommentResponse)
async def vote_comment(
    comment_id: str,
    request: VoteCommentAPIRequest,
    vote_comment_use_case: FromDishka[VoteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> VoteCommentResponse:
    """Up or down vote a comment; repeating the same vote removes it.

    Raises:
        HTTPException: 401, 400 (vote type not 1 or -1) or 404
    """
    user_id = require_user_id(jwt_service, auth_token, "vote on comments")

    try:
        return await vote_comment_use_case.execute(
            VoteCommentRequest(
                comment_id=comment_id, user_id=user_id, vote_type=request.vote_type
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
