"""Domain value objects for Nuôi DEV.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field, field_validator

from nuoidev.domain.value.common import RootValueObject, ValueObject
from nuoidev.domain.value.identifiers import UserId


class Rank(str, Enum):
    """Profile tier derived from the total vote count."""

    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"
    DIAMOND = "diamond"
    MASTER = "master"
    LEGEND = "legend"


class Mood(str, Enum):
    """Profile mood shown on the profile card."""

    HAPPY = "happy"
    SAD = "sad"
    ANGRY = "angry"
    SLEEPY = "sleepy"
    CODING = "coding"
    COFFEE = "coffee"
    DEBUGGING = "debugging"


class VoteRejection(str, Enum):
    """Reason a vote was not recorded."""

    NOT_FOUND = "not_found"
    SELF_VOTE = "self_vote"
    DAILY_QUOTA_EXCEEDED = "daily_quota_exceeded"
    ALREADY_VOTED_TODAY = "already_voted_today"


class VisitorToken(RootValueObject[str]):
    """Per-browser token identifying an anonymous visitor."""

    @field_validator("root")
    @classmethod
    def validate_token(cls, v: str) -> str:
        """Validate token is non-blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 128:
            raise ValueError("Visitor token must be 1-128 characters")
        return v


class AnonymousVoter(ValueObject):
    """Voter known only by a visitor token."""

    kind: Literal["anonymous"] = "anonymous"
    token: VisitorToken

    @property
    def key(self) -> str:
        return f"anon:{self.token.root}"


class AuthenticatedVoter(ValueObject):
    """Voter identified by a logged-in user account."""

    kind: Literal["authenticated"] = "authenticated"
    user_id: UserId

    @property
    def key(self) -> str:
        return f"user:{self.user_id}"


# Tagged union: callers match on ``kind``; the ledger only ever sees ``key``.
VoterIdentity = Annotated[
    Union[AnonymousVoter, AuthenticatedVoter], Field(discriminator="kind")
]
