"""Profile domain service."""

from urllib.parse import quote
from uuid import uuid4

import logfire

from nuoidev.domain.error import NotFoundError, ValidationError
from nuoidev.domain.model import Profile
from nuoidev.domain.repository import ProfileRepository, VoteRepository
from nuoidev.domain.value import Mood, ProfileId, Rank, UserId

from .base import Service
from .clock import Clock
from .rank_calculator import rank_for

DEFAULT_BIO = "No bio yet... 🤷"


def placeholder_avatar(seed: str) -> str:
    """Build a generated avatar URL for a profile without one."""
    return f"https://api.dicebear.com/7.x/fun-emoji/svg?seed={quote(seed)}"


class ProfileService(Service):
    """Domain service for profile operations."""

    def __init__(
        self,
        profile_repository: ProfileRepository,
        vote_repository: VoteRepository,
        clock: Clock,
    ) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
            vote_repository: Vote repository (source of truth for vote counts)
            clock: Clock used for creation and update timestamps
        """
        self.profile_repository = profile_repository
        self.vote_repository = vote_repository
        self.clock = clock

    async def create_profile(
        self,
        name: str,
        nickname: str | None = None,
        avatar: str | None = None,
        bio: str | None = None,
        skills: list[str] | None = None,
        fun_facts: list[str] | None = None,
        catchphrase: str | None = None,
        mood: Mood | None = None,
        user_id: UserId | None = None,
    ) -> Profile:
        """Create a new profile with zero votes.

        Args:
            name: Display name (required)
            nickname: Optional nickname
            avatar: Avatar URL, generated from the name if omitted
            bio: Bio text, placeholder if omitted
            skills: Skill tags
            fun_facts: Fun facts
            catchphrase: Catchphrase
            mood: Mood, happy if omitted
            user_id: Owning account when created by a logged-in user

        Returns:
            Created profile

        Raises:
            ValidationError: If name is blank
        """
        name = name.strip()
        if not name:
            raise ValidationError("Name is required")

        with logfire.span(
            "profile_service.create_profile",
            name=name,
            user_id=str(user_id) if user_id else None,
        ):
            now = self.clock.now()
            profile = Profile(
                id=ProfileId(uuid4()),
                name=name,
                nickname=(nickname or "").strip(),
                avatar=avatar or placeholder_avatar(name),
                bio=bio or DEFAULT_BIO,
                skills=skills or [],
                fun_facts=fun_facts or [],
                catchphrase=catchphrase or "",
                mood=mood or Mood.HAPPY,
                level=1,
                xp=0,
                votes=0,
                rank=Rank.BRONZE,
                user_id=user_id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.profile_repository.save(profile)
            logfire.info("Profile created", profile_id=str(saved.id), name=name)
            return saved

    async def get_profile(self, profile_id: ProfileId) -> Profile | None:
        """Get a profile by ID.

        Args:
            profile_id: Profile ID

        Returns:
            Profile if found, None otherwise
        """
        with logfire.span("profile_service.get_profile", profile_id=str(profile_id)):
            profile = await self.profile_repository.find_by_id(profile_id)
            if not profile:
                logfire.warn("Profile not found", profile_id=str(profile_id))
            return profile

    async def resync_votes(self, profile_id: ProfileId) -> Profile:
        """Recompute a profile's vote count and rank from the vote ledger.

        The count is read back from the ledger rather than incremented, so a
        missed update heals on the next call and retries are harmless.

        Args:
            profile_id: Profile ID

        Returns:
            Updated profile

        Raises:
            NotFoundError: If the profile no longer exists
        """
        with logfire.span("profile_service.resync_votes", profile_id=str(profile_id)):
            votes = await self.vote_repository.count_by_profile(profile_id)
            rank = rank_for(votes)
            updated = await self.profile_repository.update_votes_and_rank(
                profile_id, votes, rank, self.clock.now()
            )
            if not updated:
                logfire.warn(
                    "Profile vanished before resync", profile_id=str(profile_id)
                )
                raise NotFoundError("Profile", str(profile_id))

            logfire.info(
                "Profile votes resynced",
                profile_id=str(profile_id),
                votes=votes,
                rank=rank.value,
            )
            return updated

    async def leaderboard(self, limit: int) -> list[Profile]:
        """Get the most voted profiles.

        Args:
            limit: Maximum number of profiles

        Returns:
            Profiles ordered by votes descending
        """
        with logfire.span("profile_service.leaderboard", limit=limit):
            profiles = await self.profile_repository.find_top(limit)
            logfire.info("Leaderboard retrieved", count=len(profiles))
            return profiles
