"""Unit tests for profile lookup and creation use cases."""

from uuid import uuid4

import pytest

from nuoidev.application.usecase.profile import (
    CreateProfileRequest,
    CreateProfileUseCase,
    GetProfileRequest,
    GetProfileUseCase,
)
from nuoidev.domain.value import Mood
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetProfile:
    """Tests for GetProfileUseCase."""

    @pytest.mark.asyncio
    async def test_created_profile_can_be_fetched(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateProfileUseCase)
        get = await unit_env.get(GetProfileUseCase)
        created = await create.execute(
            CreateProfileRequest(
                name="Tèo",
                skills=["rust", "coffee"],
                mood=Mood.DEBUGGING,
                user_id=str(uuid4()),
            )
        )

        # Act
        fetched = await get.execute(GetProfileRequest(profile_id=created.profile_id))

        # Assert
        assert fetched == created
        assert fetched.skills == ["rust", "coffee"]
        assert fetched.mood == Mood.DEBUGGING
        assert fetched.votes == 0

    @pytest.mark.asyncio
    async def test_unknown_id_returns_none(self, unit_env):
        get = await unit_env.get(GetProfileUseCase)

        assert await get.execute(GetProfileRequest(profile_id=str(uuid4()))) is None

    @pytest.mark.asyncio
    async def test_malformed_id_returns_none(self, unit_env):
        get = await unit_env.get(GetProfileUseCase)

        assert await get.execute(GetProfileRequest(profile_id="not-a-uuid")) is None
