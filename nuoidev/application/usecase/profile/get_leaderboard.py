"""Get leaderboard use case."""

from pydantic import BaseModel, Field

from nuoidev.config import VotingSettings
from nuoidev.domain.service import ProfileService

from .get_profile import ProfileResponse


class GetLeaderboardRequest(BaseModel):
    """Get leaderboard request."""

    limit: int | None = Field(None, ge=1, le=200)


class GetLeaderboardResponse(BaseModel):
    """Get leaderboard response."""

    profiles: list[ProfileResponse]


class GetLeaderboardUseCase:
    """Use case for listing the most voted profiles."""

    def __init__(
        self, profile_service: ProfileService, voting_settings: VotingSettings
    ) -> None:
        self.profile_service = profile_service
        self.voting_settings = voting_settings

    async def execute(self, request: GetLeaderboardRequest) -> GetLeaderboardResponse:
        limit = request.limit or self.voting_settings.leaderboard_size
        profiles = await self.profile_service.leaderboard(limit)
        return GetLeaderboardResponse(
            profiles=[ProfileResponse.from_profile(p) for p in profiles]
        )
