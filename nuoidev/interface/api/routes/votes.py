"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from nuoidev.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetRemainingVotesRequest,
    GetRemainingVotesResponse,
    GetRemainingVotesUseCase,
)
from nuoidev.config import VotingSettings
from nuoidev.domain.error import VoteRejectedError
from nuoidev.domain.service import JWTService
from nuoidev.domain.value import VoteRejection
from nuoidev.interface.api.identity import resolve_voter

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)

REJECTION_STATUS = {
    VoteRejection.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    VoteRejection.SELF_VOTE: status.HTTP_403_FORBIDDEN,
    VoteRejection.DAILY_QUOTA_EXCEEDED: status.HTTP_429_TOO_MANY_REQUESTS,
    VoteRejection.ALREADY_VOTED_TODAY: status.HTTP_429_TOO_MANY_REQUESTS,
}


class CastVoteAPIRequest(BaseModel):
    """API request for casting a vote."""

    profile_id: str
    visitor_id: str | None = Field(None, max_length=128)


class VoteRejectionResponse(BaseModel):
    """Body returned when a vote is refused."""

    detail: str
    kind: VoteRejection
    remaining_votes_today: int


@router.post(
    "",
    response_model=CastVoteResponse,
    responses={
        404: {"model": VoteRejectionResponse},
        403: {"model": VoteRejectionResponse},
        429: {"model": VoteRejectionResponse},
    },
)
async def cast_vote(
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    voting_settings: FromDishka[VotingSettings],
    auth_token: str | None = Cookie(default=None),
):
    """Vote for a profile.

    Logged-in users vote with their account; everyone else votes with the
    visitor id their browser generated.

    Args:
        request: Target profile and optional visitor id
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for session verification (injected)
        voting_settings: Voting configuration (injected)
        auth_token: Session token from cookie

    Returns:
        Updated profile vote count, rank and remaining votes, or a
        rejection body with 404/403/429

    Raises:
        HTTPException: 400 if no voter identity was supplied
    """
    voter = resolve_voter(
        jwt_service, voting_settings, auth_token, request.visitor_id
    )
    if voter is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing voter identity",
        )

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(profile_id=request.profile_id, voter=voter)
        )
    except VoteRejectedError as e:
        body = VoteRejectionResponse(
            detail=str(e), kind=e.kind, remaining_votes_today=e.remaining_votes
        )
        return JSONResponse(
            status_code=REJECTION_STATUS[e.kind], content=body.model_dump(mode="json")
        )


@router.get("/remaining", response_model=GetRemainingVotesResponse)
async def get_remaining_votes(
    get_remaining_votes_use_case: FromDishka[GetRemainingVotesUseCase],
    jwt_service: FromDishka[JWTService],
    voting_settings: FromDishka[VotingSettings],
    visitor_id: str | None = Query(default=None, max_length=128),
    auth_token: str | None = Cookie(default=None),
) -> GetRemainingVotesResponse:
    """Get how many votes the caller has left today.

    A visitor id is ignored when anonymous voting is off, so the lookup
    reports the full cap instead of failing.

    Args:
        get_remaining_votes_use_case: Use case from DI
        jwt_service: JWT service for session verification (injected)
        voting_settings: Voting configuration (injected)
        visitor_id: Per-browser visitor token
        auth_token: Session token from cookie

    Returns:
        Remaining votes, votes used today and the daily cap
    """
    if not voting_settings.allow_anonymous:
        visitor_id = None
    voter = resolve_voter(jwt_service, voting_settings, auth_token, visitor_id)
    return await get_remaining_votes_use_case.execute(
        GetRemainingVotesRequest(voter=voter)
    )
