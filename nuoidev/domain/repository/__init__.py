"""Repository interfaces for Nuôi DEV domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from nuoidev.domain.repository.profile import ProfileRepository
from nuoidev.domain.repository.vote import VoteRepository

__all__ = [
    "ProfileRepository",
    "VoteRepository",
]
