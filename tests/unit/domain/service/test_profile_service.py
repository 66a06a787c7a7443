"""Unit tests for ProfileService."""

from datetime import date, datetime, timedelta, timezone
from uuid import uuid4

import pytest

from nuoidev.domain.error import NotFoundError, ValidationError
from nuoidev.domain.model import Vote
from nuoidev.domain.repository import ProfileRepository, VoteRepository
from nuoidev.domain.service import ProfileService
from nuoidev.domain.service.profile_service import DEFAULT_BIO
from nuoidev.domain.value import Mood, ProfileId, Rank, UserId, VoteId
from tests.conftest import make_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def append_votes(vote_repo: VoteRepository, profile_id: ProfileId, count: int):
    """Append ``count`` votes from distinct voters straight into the ledger."""
    for i in range(count):
        await vote_repo.save(
            Vote(
                id=VoteId(uuid4()),
                profile_id=profile_id,
                voter_key=f"anon:voter-{i}",
                created_at=datetime(2025, 1, 15, tzinfo=timezone.utc),
                vote_day=date(2025, 1, 15),
            )
        )


class TestResyncVotes:
    """Tests for resync_votes."""

    @pytest.mark.asyncio
    async def test_recomputes_votes_and_rank_from_ledger(self, unit_env):
        """Stored count and rank follow the ledger."""
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        vote_repo = await unit_env.get(VoteRepository)
        profile = await profile_repo.save(make_profile())
        await append_votes(vote_repo, profile.id, 20)

        # Act
        updated = await profile_service.resync_votes(profile.id)

        # Assert
        assert updated.votes == 20
        assert updated.rank == Rank.SILVER
        stored = await profile_repo.find_by_id(profile.id)
        assert stored.votes == 20

    @pytest.mark.asyncio
    async def test_is_idempotent(self, unit_env):
        """Running resync twice without new votes changes nothing."""
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        vote_repo = await unit_env.get(VoteRepository)
        profile = await profile_repo.save(make_profile())
        await append_votes(vote_repo, profile.id, 3)

        # Act
        first = await profile_service.resync_votes(profile.id)
        second = await profile_service.resync_votes(profile.id)

        # Assert
        assert (first.votes, first.rank) == (second.votes, second.rank) == (
            3,
            Rank.BRONZE,
        )

    @pytest.mark.asyncio
    async def test_heals_stale_denormalized_count(self, unit_env):
        """A wrong stored count is overwritten, not incremented."""
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        vote_repo = await unit_env.get(VoteRepository)
        profile = await profile_repo.save(make_profile(votes=999, rank=Rank.MASTER))
        await append_votes(vote_repo, profile.id, 1)

        # Act
        updated = await profile_service.resync_votes(profile.id)

        # Assert
        assert updated.votes == 1
        assert updated.rank == Rank.BRONZE

    @pytest.mark.asyncio
    async def test_deleted_profile_raises_not_found(self, unit_env):
        """A profile removed before resync is reported as not found."""
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        profile = await profile_repo.save(make_profile())
        await profile_repo.delete(profile.id)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Profile not found"):
            await profile_service.resync_votes(profile.id)


class TestCreateProfile:
    """Tests for create_profile."""

    @pytest.mark.asyncio
    async def test_defaults(self, unit_env):
        """A minimal profile starts at zero votes and bronze."""
        # Arrange
        profile_service = await unit_env.get(ProfileService)

        # Act
        profile = await profile_service.create_profile(name="  Tí Bug  ")

        # Assert
        assert profile.name == "Tí Bug"
        assert profile.votes == 0
        assert profile.rank == Rank.BRONZE
        assert profile.mood == Mood.HAPPY
        assert profile.bio == DEFAULT_BIO
        assert profile.avatar.startswith("https://api.dicebear.com/")
        assert profile.created_at == datetime(2025, 1, 15, 9, 30, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_links_owner(self, unit_env):
        """The owning account is recorded."""
        profile_service = await unit_env.get(ProfileService)
        owner = UserId(uuid4())

        profile = await profile_service.create_profile(name="Owner", user_id=owner)

        assert profile.user_id == owner

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(ValidationError, match="Name is required"):
            await profile_service.create_profile(name="   ")


class TestLeaderboard:
    """Tests for leaderboard."""

    @pytest.mark.asyncio
    async def test_orders_by_votes_then_age(self, unit_env):
        """Most voted first; ties go to the older profile."""
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        base = datetime(2025, 1, 1, tzinfo=timezone.utc)
        older = await profile_repo.save(
            make_profile(name="Older", votes=5, created_at=base)
        )
        newer = await profile_repo.save(
            make_profile(name="Newer", votes=5, created_at=base + timedelta(days=1))
        )
        top = await profile_repo.save(make_profile(name="Top", votes=30))
        await profile_repo.save(make_profile(name="Zero", votes=0))

        # Act
        profiles = await profile_service.leaderboard(3)

        # Assert
        assert [p.id for p in profiles] == [top.id, older.id, newer.id]
