"""Unit tests for GetLeaderboardUseCase."""

import pytest

from nuoidev.application.usecase.profile import (
    GetLeaderboardRequest,
    GetLeaderboardUseCase,
)
from nuoidev.domain.repository import ProfileRepository
from tests.conftest import make_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetLeaderboard:
    """Tests for GetLeaderboardUseCase."""

    @pytest.mark.asyncio
    async def test_default_size_from_settings(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetLeaderboardUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        for i in range(55):
            await profile_repo.save(make_profile(name=f"Dev {i}", votes=i))

        # Act
        response = await use_case.execute(GetLeaderboardRequest())

        # Assert
        assert len(response.profiles) == 50
        assert response.profiles[0].votes == 54

    @pytest.mark.asyncio
    async def test_explicit_limit(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetLeaderboardUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        for i in range(5):
            await profile_repo.save(make_profile(name=f"Dev {i}", votes=i))

        # Act
        response = await use_case.execute(GetLeaderboardRequest(limit=2))

        # Assert
        assert [p.votes for p in response.profiles] == [4, 3]
