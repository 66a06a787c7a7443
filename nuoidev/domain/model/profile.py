"""Profile aggregate root.

A profile is a humorous developer card that the community votes for.
Only ``votes`` and ``rank`` are maintained by the vote subsystem; both are
derived from the vote ledger and must never be edited directly.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from nuoidev.domain.model.common import DomainModel
from nuoidev.domain.value import Mood, ProfileId, Rank, UserId


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Profile(DomainModel):
    """Developer profile."""

    id: ProfileId
    name: str = Field(min_length=1, max_length=100)
    nickname: str = ""
    avatar: str
    bio: str = ""
    skills: list[str] = Field(default_factory=list)
    fun_facts: list[str] = Field(default_factory=list)
    catchphrase: str = ""
    mood: Mood = Mood.HAPPY
    level: int = Field(default=1, ge=1)
    xp: int = Field(default=0, ge=0)
    votes: int = Field(default=0, ge=0)
    rank: Rank = Rank.BRONZE
    user_id: Optional[UserId] = None  # Owner account, if created while logged in
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
