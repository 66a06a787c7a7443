"""Create profile use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from nuoidev.domain.service import ProfileService
from nuoidev.domain.value import Mood, UserId

from .get_profile import ProfileResponse


class CreateProfileRequest(BaseModel):
    """Create profile request."""

    name: str = Field(max_length=100)
    nickname: str | None = Field(None, max_length=100)
    avatar: str | None = None
    bio: str | None = Field(None, max_length=1000)
    skills: list[str] = Field(default_factory=list, max_length=20)
    fun_facts: list[str] = Field(default_factory=list, max_length=20)
    catchphrase: str | None = Field(None, max_length=200)
    mood: Mood | None = None
    user_id: str | None = None  # Set from the session, never from the body


class CreateProfileUseCase:
    """Use case for creating a developer profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize create profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: CreateProfileRequest) -> ProfileResponse:
        """Execute create profile flow.

        Args:
            request: Create profile request

        Returns:
            Created profile

        Raises:
            ValidationError: If name is blank
        """
        profile = await self.profile_service.create_profile(
            name=request.name,
            nickname=request.nickname,
            avatar=request.avatar,
            bio=request.bio,
            skills=request.skills,
            fun_facts=request.fun_facts,
            catchphrase=request.catchphrase,
            mood=request.mood,
            user_id=UserId(UUID(request.user_id)) if request.user_id else None,
        )
        return ProfileResponse.from_profile(profile)
