"""Poll use cases."""

from .cast_vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    VotedOptionItem,
)
from .common import OptionItem, PollItem, PollResponse
from .create_poll import CreatePollRequest, CreatePollUseCase
from .delete_poll import DeletePollRequest, DeletePollResponse, DeletePollUseCase
from .get_poll import GetPollRequest, GetPollUseCase
from .list_polls import ListPollsResponse, ListPollsUseCase
from .update_poll import UpdatePollRequest, UpdatePollUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "CreatePollRequest",
    "CreatePollUseCase",
    "DeletePollRequest",
    "DeletePollResponse",
    "DeletePollUseCase",
    "GetPollRequest",
    "GetPollUseCase",
    "ListPollsResponse",
    "ListPollsUseCase",
    "OptionItem",
    "PollItem",
    "PollResponse",
    "UpdatePollRequest",
    "UpdatePollUseCase",
    "VotedOptionItem",
]
