"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from nuoidev.domain.error import VoteRejectedError
from nuoidev.domain.service import VoteService
from nuoidev.domain.value import ProfileId, Rank, VoteRejection, VoterIdentity


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    profile_id: str  # UUID string
    voter: VoterIdentity  # Resolved from the session or visitor token


class VotedProfile(BaseModel):
    """Subset of the profile affected by a vote."""

    profile_id: str
    name: str
    votes: int
    rank: Rank


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    vote_id: str
    profile: VotedProfile
    remaining_votes_today: int


class CastVoteUseCase:
    """Use case for voting for a profile."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Updated vote count, rank and remaining quota

        Raises:
            VoteRejectedError: If the vote is refused (including unknown or
                malformed profile IDs)
        """
        try:
            profile_id = ProfileId(UUID(request.profile_id))
        except ValueError:
            raise VoteRejectedError(
                VoteRejection.NOT_FOUND,
                await self.vote_service.remaining_votes_today(request.voter),
                "Profile not found",
            )

        receipt = await self.vote_service.try_vote(request.voter, profile_id)

        return CastVoteResponse(
            vote_id=str(receipt.vote.id),
            profile=VotedProfile(
                profile_id=str(receipt.profile.id),
                name=receipt.profile.name,
                votes=receipt.profile.votes,
                rank=receipt.profile.rank,
            ),
            remaining_votes_today=receipt.remaining_votes,
        )
