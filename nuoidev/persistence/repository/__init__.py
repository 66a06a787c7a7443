"""PostgreSQL repository implementations."""

from nuoidev.persistence.repository.profile import PostgresProfileRepository
from nuoidev.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresProfileRepository",
    "PostgresVoteRepository",
]
