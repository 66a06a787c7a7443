"""Get remaining votes use case."""

from pydantic import BaseModel

from nuoidev.domain.service import VoteService
from nuoidev.domain.value import VoterIdentity


class GetRemainingVotesRequest(BaseModel):
    """Get remaining votes request."""

    voter: VoterIdentity | None = None  # None when the caller has no identity yet


class GetRemainingVotesResponse(BaseModel):
    """Get remaining votes response."""

    remaining_votes_today: int
    today_votes: int
    daily_vote_cap: int


class GetRemainingVotesUseCase:
    """Read-only quota lookup shown before a vote is attempted."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize get remaining votes use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(
        self, request: GetRemainingVotesRequest
    ) -> GetRemainingVotesResponse:
        """Execute get remaining votes flow.

        A caller without any identity has not voted yet, so gets the full cap.

        Args:
            request: Get remaining votes request

        Returns:
            Remaining and used votes for the current UTC day
        """
        cap = self.vote_service.daily_cap
        if request.voter is None:
            return GetRemainingVotesResponse(
                remaining_votes_today=cap, today_votes=0, daily_vote_cap=cap
            )

        used = await self.vote_service.today_votes(request.voter)
        return GetRemainingVotesResponse(
            remaining_votes_today=max(0, cap - used),
            today_votes=used,
            daily_vote_cap=cap,
        )
