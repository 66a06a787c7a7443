"""Unit tests for GetRemainingVotesUseCase."""

import pytest

from nuoidev.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetRemainingVotesRequest,
    GetRemainingVotesUseCase,
)
from nuoidev.domain.repository import ProfileRepository
from nuoidev.domain.value import AnonymousVoter, VisitorToken
from tests.conftest import make_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetRemainingVotes:
    """Tests for GetRemainingVotesUseCase."""

    @pytest.mark.asyncio
    async def test_no_identity_gets_full_cap(self, unit_env):
        use_case = await unit_env.get(GetRemainingVotesUseCase)

        response = await use_case.execute(GetRemainingVotesRequest())

        assert response.remaining_votes_today == 10
        assert response.today_votes == 0
        assert response.daily_vote_cap == 10

    @pytest.mark.asyncio
    async def test_reflects_votes_cast_today(self, unit_env):
        # Arrange
        cast_vote = await unit_env.get(CastVoteUseCase)
        use_case = await unit_env.get(GetRemainingVotesUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        voter = AnonymousVoter(token=VisitorToken("visitor-1"))
        for i in range(3):
            profile = await profile_repo.save(make_profile(name=f"Dev {i}"))
            await cast_vote.execute(
                CastVoteRequest(profile_id=str(profile.id), voter=voter)
            )

        # Act
        response = await use_case.execute(GetRemainingVotesRequest(voter=voter))

        # Assert
        assert response.remaining_votes_today == 7
        assert response.today_votes == 3
