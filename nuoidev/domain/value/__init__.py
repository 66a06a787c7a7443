"""Domain value objects for Nuôi DEV."""

from nuoidev.domain.value.identifiers import ProfileId, UserId, VoteId
from nuoidev.domain.value.types import (
    AnonymousVoter,
    AuthenticatedVoter,
    Mood,
    Rank,
    VisitorToken,
    VoteRejection,
    VoterIdentity,
)

__all__ = [
    # Identifiers
    "ProfileId",
    "UserId",
    "VoteId",
    # Types
    "AnonymousVoter",
    "AuthenticatedVoter",
    "Mood",
    "Rank",
    "VisitorToken",
    "VoteRejection",
    "VoterIdentity",
]
