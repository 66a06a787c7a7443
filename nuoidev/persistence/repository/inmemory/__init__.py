"""In-memory repository implementations for testing."""

from .profile import InMemoryProfileRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryProfileRepository",
    "InMemoryVoteRepository",
]
