"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase, VotedProfile
from .get_remaining_votes import (
    GetRemainingVotesRequest,
    GetRemainingVotesResponse,
    GetRemainingVotesUseCase,
)

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetRemainingVotesRequest",
    "GetRemainingVotesResponse",
    "GetRemainingVotesUseCase",
    "VotedProfile",
]
