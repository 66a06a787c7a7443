"""Get profile use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from nuoidev.domain.model import Profile
from nuoidev.domain.service import ProfileService
from nuoidev.domain.value import Mood, ProfileId, Rank


class GetProfileRequest(BaseModel):
    """Get profile request."""

    profile_id: str  # UUID string


class ProfileResponse(BaseModel):
    """Full profile as returned by the API."""

    profile_id: str
    name: str
    nickname: str
    avatar: str
    bio: str
    skills: list[str]
    fun_facts: list[str]
    catchphrase: str
    mood: Mood
    level: int
    xp: int
    votes: int
    rank: Rank
    user_id: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            profile_id=str(profile.id),
            name=profile.name,
            nickname=profile.nickname,
            avatar=profile.avatar,
            bio=profile.bio,
            skills=profile.skills,
            fun_facts=profile.fun_facts,
            catchphrase=profile.catchphrase,
            mood=profile.mood,
            level=profile.level,
            xp=profile.xp,
            votes=profile.votes,
            rank=profile.rank,
            user_id=str(profile.user_id) if profile.user_id else None,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class GetProfileUseCase:
    """Use case for retrieving a profile by ID."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize get profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: GetProfileRequest) -> Optional[ProfileResponse]:
        """Execute get profile flow.

        Args:
            request: Get profile request

        Returns:
            Profile if found, None otherwise (including malformed IDs)
        """
        try:
            profile_id = ProfileId(UUID(request.profile_id))
        except ValueError:
            return None

        profile = await self.profile_service.get_profile(profile_id)
        if not profile:
            return None
        return ProfileResponse.from_profile(profile)
