"""In-memory vote repository for testing."""

import asyncio
from contextlib import asynccontextmanager
from datetime import date
from typing import AsyncIterator

from sqlalchemy.exc import IntegrityError

from nuoidev.domain.model.vote import Vote
from nuoidev.domain.repository.vote import VoteRepository
from nuoidev.domain.value import ProfileId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []
        self._locks: dict[str, asyncio.Lock] = {}

    async def save(self, vote: Vote) -> Vote:
        """Append a vote.

        Raises:
            IntegrityError: If the voter already voted for the profile that day
        """
        # Mirrors the unique_vote_per_day constraint
        if any(
            v.voter_key == vote.voter_key
            and v.profile_id == vote.profile_id
            and v.vote_day == vote.vote_day
            for v in self._votes
        ):
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def count_by_profile(self, profile_id: ProfileId) -> int:
        """Count every vote ever cast for a profile."""
        return sum(1 for v in self._votes if v.profile_id == profile_id)

    async def count_by_voter_on_day(self, voter_key: str, day: date) -> int:
        """Count the votes a voter cast on a given UTC day."""
        return sum(
            1 for v in self._votes if v.voter_key == voter_key and v.vote_day == day
        )

    async def exists_for_voter_and_profile_on_day(
        self, voter_key: str, profile_id: ProfileId, day: date
    ) -> bool:
        """Check whether a voter already voted for a profile on a given day."""
        return any(
            v.voter_key == voter_key and v.profile_id == profile_id and v.vote_day == day
            for v in self._votes
        )

    async def find_by_voter(self, voter_key: str) -> list[Vote]:
        """Find all votes cast by a voter, oldest first."""
        return sorted(
            (v for v in self._votes if v.voter_key == voter_key),
            key=lambda v: v.created_at,
        )

    @asynccontextmanager
    async def voter_lock(self, voter_key: str) -> AsyncIterator[None]:
        """Hold a per-voter asyncio lock for the duration of the context."""
        lock = self._locks.setdefault(voter_key, asyncio.Lock())
        async with lock:
            yield
