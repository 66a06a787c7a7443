"""Domain layer DI providers."""

from dishka import Scope, provide

from nuoidev.config import AuthSettings, VotingSettings
from nuoidev.domain.repository import ProfileRepository, VoteRepository
from nuoidev.domain.service import Clock, JWTService, ProfileService, VoteService
from nuoidev.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_profile_service(
        self,
        profile_repository: ProfileRepository,
        vote_repository: VoteRepository,
        clock: Clock,
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(
            profile_repository=profile_repository,
            vote_repository=vote_repository,
            clock=clock,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        profile_service: ProfileService,
        voting_settings: VotingSettings,
        clock: Clock,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            profile_service=profile_service,
            voting_settings=voting_settings,
            clock=clock,
        )
