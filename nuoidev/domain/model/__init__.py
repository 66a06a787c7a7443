"""Domain model entities for Nuôi DEV."""

from nuoidev.domain.model.profile import Profile
from nuoidev.domain.model.vote import Vote

__all__ = [
    "Profile",
    "Vote",
]
