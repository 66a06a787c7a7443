"""Unit tests for CastVoteUseCase."""

import pytest

from nuoidev.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from nuoidev.domain.error import VoteRejectedError
from nuoidev.domain.repository import ProfileRepository
from nuoidev.domain.value import AnonymousVoter, Rank, VisitorToken, VoteRejection
from tests.conftest import make_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.fixture
def voter() -> AnonymousVoter:
    return AnonymousVoter(token=VisitorToken("visitor-1"))


class TestCastVote:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_returns_updated_profile_and_quota(self, unit_env, voter):
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        profile = await profile_repo.save(make_profile(name="Béo Backend", votes=19))

        # Act
        response = await use_case.execute(
            CastVoteRequest(profile_id=str(profile.id), voter=voter)
        )

        # Assert
        # Resync counts the ledger, which holds only this vote
        assert response.profile.profile_id == str(profile.id)
        assert response.profile.name == "Béo Backend"
        assert response.profile.votes == 1
        assert response.profile.rank == Rank.BRONZE
        assert response.remaining_votes_today == 9
        assert response.vote_id

    @pytest.mark.asyncio
    async def test_malformed_profile_id_is_not_found(self, unit_env, voter):
        """A non-UUID profile ID is treated as an unknown profile."""
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(VoteRejectedError) as exc_info:
            await use_case.execute(CastVoteRequest(profile_id="nope", voter=voter))

        assert exc_info.value.kind == VoteRejection.NOT_FOUND
        assert exc_info.value.remaining_votes == 10
