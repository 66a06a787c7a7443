"""Vote entity.

A vote is one act of support from a voter toward a profile. Votes are
append-only: once recorded they are never changed or removed.
"""

from datetime import date, datetime

from nuoidev.domain.model.common import DomainModel
from nuoidev.domain.value import ProfileId, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - At most one vote per voter per profile per UTC day
    - At most ``daily_vote_cap`` votes per voter per UTC day
    """

    id: VoteId
    profile_id: ProfileId
    voter_key: str  # AnonymousVoter.key or AuthenticatedVoter.key
    created_at: datetime  # UTC, timezone-aware
    vote_day: date  # UTC calendar day of created_at
