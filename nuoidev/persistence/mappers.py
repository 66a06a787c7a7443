"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from nuoidev.domain.model import Profile, Vote
from nuoidev.domain.value import Mood, ProfileId, Rank, UserId, VoteId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model.

    Args:
        row: Database row as dict

    Returns:
        Profile domain model
    """
    return Profile(
        id=ProfileId(_uuid(row["id"])),
        name=row["name"],
        nickname=row.get("nickname") or "",
        avatar=row["avatar"],
        bio=row.get("bio") or "",
        skills=list(row.get("skills") or []),
        fun_facts=list(row.get("fun_facts") or []),
        catchphrase=row.get("catchphrase") or "",
        mood=Mood(row["mood"]),
        level=row["level"],
        xp=row["xp"],
        votes=row["votes"],
        rank=Rank(row["rank"]),
        user_id=UserId(_uuid(row["user_id"])) if row.get("user_id") else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict.

    Args:
        profile: Profile domain model

    Returns:
        Dict suitable for database insertion
    """
    # Enums dump to their string values
    return profile.model_dump(mode="json") | {
        "id": profile.id,
        "user_id": profile.user_id,
        "created_at": profile.created_at,
        "updated_at": profile.updated_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        profile_id=ProfileId(_uuid(row["profile_id"])),
        voter_key=row["voter_key"],
        created_at=row["created_at"],
        vote_day=row["vote_day"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    return vote.model_dump()
