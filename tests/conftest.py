"""Test configuration and fixtures."""

from datetime import datetime, timezone
from uuid import uuid4

from nuoidev.domain.model import Profile
from nuoidev.domain.value import Mood, ProfileId, Rank, UserId


def make_profile(
    name: str = "Tèo Coder",
    votes: int = 0,
    rank: Rank = Rank.BRONZE,
    user_id: UserId | None = None,
    created_at: datetime | None = None,
) -> Profile:
    """Helper function to build a profile for tests.

    Args:
        name: Display name
        votes: Stored vote count
        rank: Stored rank
        user_id: Owning account, if any
        created_at: Creation time, defaults to a fixed instant

    Returns:
        Profile ready to be saved in a repository
    """
    created_at = created_at or datetime(2025, 1, 1, tzinfo=timezone.utc)
    return Profile(
        id=ProfileId(uuid4()),
        name=name,
        nickname="teo",
        avatar="https://example.com/avatar.svg",
        bio="Viết code bằng cà phê",
        skills=["python", "fastapi"],
        fun_facts=["Debugs in production"],
        catchphrase="It works on my machine",
        mood=Mood.CODING,
        level=1,
        xp=0,
        votes=votes,
        rank=rank,
        user_id=user_id,
        created_at=created_at,
        updated_at=created_at,
    )
