"""In-memory profile repository for testing."""

from datetime import datetime
from typing import Optional

from nuoidev.domain.model.profile import Profile
from nuoidev.domain.repository.profile import ProfileRepository
from nuoidev.domain.value import ProfileId, Rank


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[ProfileId, Profile] = {}

    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID."""
        return self._profiles.get(profile_id)

    async def save(self, profile: Profile) -> Profile:
        """Save a profile."""
        self._profiles[profile.id] = profile
        return profile

    async def update_votes_and_rank(
        self,
        profile_id: ProfileId,
        votes: int,
        rank: Rank,
        updated_at: datetime,
    ) -> Optional[Profile]:
        """Overwrite the denormalized vote count and rank."""
        profile = self._profiles.get(profile_id)
        if not profile:
            return None
        updated = profile.model_copy(
            update={
                "votes": votes,
                "rank": rank,
                "updated_at": updated_at,
            }
        )
        self._profiles[profile_id] = updated
        return updated

    async def find_top(self, limit: int) -> list[Profile]:
        """Find the most voted profiles."""
        ordered = sorted(
            self._profiles.values(), key=lambda p: (-p.votes, p.created_at)
        )
        return ordered[:limit]

    async def delete(self, profile_id: ProfileId) -> None:
        """Remove a profile (used to simulate concurrent deletion)."""
        self._profiles.pop(profile_id, None)
