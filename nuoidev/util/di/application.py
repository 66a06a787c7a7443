"""Application layer DI providers."""

from dishka import Scope, provide

from nuoidev.application.usecase.profile import (
    CreateProfileUseCase,
    GetLeaderboardUseCase,
    GetProfileUseCase,
)
from nuoidev.application.usecase.vote import CastVoteUseCase, GetRemainingVotesUseCase
from nuoidev.config import VotingSettings
from nuoidev.domain.service import ProfileService, VoteService
from nuoidev.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_remaining_votes_use_case(
        self, vote_service: VoteService
    ) -> GetRemainingVotesUseCase:
        """Provide get remaining votes use case."""
        return GetRemainingVotesUseCase(vote_service=vote_service)

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_create_profile_use_case(
        self, profile_service: ProfileService
    ) -> CreateProfileUseCase:
        """Provide create profile use case."""
        return CreateProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_get_profile_use_case(
        self, profile_service: ProfileService
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_leaderboard_use_case(
        self, profile_service: ProfileService, voting_settings: VotingSettings
    ) -> GetLeaderboardUseCase:
        """Provide get leaderboard use case."""
        return GetLeaderboardUseCase(
            profile_service=profile_service, voting_settings=voting_settings
        )
