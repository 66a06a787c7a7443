"""Profile use cases."""

from .create_profile import CreateProfileRequest, CreateProfileUseCase
from .get_leaderboard import (
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
)
from .get_profile import GetProfileRequest, GetProfileUseCase, ProfileResponse

__all__ = [
    "CreateProfileRequest",
    "CreateProfileUseCase",
    "GetLeaderboardRequest",
    "GetLeaderboardResponse",
    "GetLeaderboardUseCase",
    "GetProfileRequest",
    "GetProfileUseCase",
    "ProfileResponse",
]
