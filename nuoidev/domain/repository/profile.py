"""Profile repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from nuoidev.domain.model.profile import Profile
from nuoidev.domain.value import ProfileId, Rank


class ProfileRepository(ABC):
    """Repository for Profile aggregate.

    Defines the contract for profile persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID.

        Args:
            profile_id: The profile's unique identifier

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create).

        Args:
            profile: The profile to save

        Returns:
            The saved profile
        """
        pass

    @abstractmethod
    async def update_votes_and_rank(
        self,
        profile_id: ProfileId,
        votes: int,
        rank: Rank,
        updated_at: datetime,
    ) -> Optional[Profile]:
        """Overwrite the denormalized vote count and rank.

        All other profile fields are left untouched apart from
        ``updated_at``.

        Args:
            profile_id: The profile's unique identifier
            votes: Authoritative vote count from the ledger
            rank: Rank derived from ``votes``
            updated_at: Modification time, taken from the service clock

        Returns:
            The updated profile, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def find_top(self, limit: int) -> list[Profile]:
        """Find the most voted profiles.

        Ordered by votes descending, then by creation time ascending.

        Args:
            limit: Maximum number of profiles to return

        Returns:
            List of profiles
        """
        pass
