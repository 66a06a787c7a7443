"""Vote repository interface (the vote ledger)."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from datetime import date

from nuoidev.domain.model.vote import Vote
from nuoidev.domain.value import ProfileId


class VoteRepository(ABC):
    """Append-only store of cast votes.

    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Append a vote.

        Uniqueness of (voter, profile, day) is checked by the caller; the
        storage layer still rejects a duplicate that slips through.

        Args:
            vote: The vote to append

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the voter already has a vote for this
                profile on ``vote.vote_day``
        """
        pass

    @abstractmethod
    async def count_by_profile(self, profile_id: ProfileId) -> int:
        """Count every vote ever cast for a profile.

        Args:
            profile_id: Target profile

        Returns:
            Number of votes
        """
        pass

    @abstractmethod
    async def count_by_voter_on_day(self, voter_key: str, day: date) -> int:
        """Count the votes a voter cast on a given UTC day.

        Args:
            voter_key: Voter identity key
            day: UTC calendar day

        Returns:
            Number of votes
        """
        pass

    @abstractmethod
    async def exists_for_voter_and_profile_on_day(
        self, voter_key: str, profile_id: ProfileId, day: date
    ) -> bool:
        """Check whether a voter already voted for a profile on a given day.

        Args:
            voter_key: Voter identity key
            profile_id: Target profile
            day: UTC calendar day

        Returns:
            True if such a vote exists
        """
        pass

    @abstractmethod
    async def find_by_voter(self, voter_key: str) -> list[Vote]:
        """Find all votes cast by a voter, oldest first.

        Args:
            voter_key: Voter identity key

        Returns:
            List of votes
        """
        pass

    @abstractmethod
    def voter_lock(self, voter_key: str) -> AbstractAsyncContextManager[None]:
        """Serialize quota checks and appends for one voter.

        Everything done inside the context runs without another request for
        the same voter interleaving its own check-then-append.

        Args:
            voter_key: Voter identity key
        """
        pass
