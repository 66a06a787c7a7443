"""Vote domain service.

Enforces the daily vote quota and records accepted votes.
"""

from dataclasses import dataclass
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from nuoidev.config import VotingSettings
from nuoidev.domain.error import NotFoundError, VoteRejectedError
from nuoidev.domain.model import Profile, Vote
from nuoidev.domain.repository import VoteRepository
from nuoidev.domain.value import (
    AuthenticatedVoter,
    ProfileId,
    VoteId,
    VoteRejection,
    VoterIdentity,
)

from .base import Service
from .clock import Clock, utc_day
from .profile_service import ProfileService


@dataclass
class VoteReceipt:
    """Outcome of an accepted vote."""

    vote: Vote
    profile: Profile
    remaining_votes: int


class VoteService(Service):
    """Domain service for casting votes under the daily quota."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        profile_service: ProfileService,
        voting_settings: VotingSettings,
        clock: Clock,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            profile_service: Profile domain service
            voting_settings: Quota configuration
            clock: Clock that defines "today"
        """
        self.vote_repository = vote_repository
        self.profile_service = profile_service
        self.voting_settings = voting_settings
        self.clock = clock

    @property
    def daily_cap(self) -> int:
        return self.voting_settings.daily_vote_cap

    async def try_vote(
        self, voter: VoterIdentity, profile_id: ProfileId
    ) -> VoteReceipt:
        """Cast a vote for a profile if the quota allows it.

        Checks run cheapest first: profile existence, self-vote, daily
        quota, then same-profile-same-day.

        Args:
            voter: Voter identity
            profile_id: Target profile ID

        Returns:
            Receipt with the recorded vote, the resynced profile and the
            votes left today

        Raises:
            VoteRejectedError: If the vote is refused
        """
        with logfire.span(
            "vote_service.try_vote",
            voter_key=voter.key,
            voter_kind=voter.kind,
            profile_id=str(profile_id),
        ):
            profile = await self.profile_service.get_profile(profile_id)
            if not profile:
                raise VoteRejectedError(
                    VoteRejection.NOT_FOUND,
                    await self.remaining_votes_today(voter),
                    "Profile not found",
                )

            if (
                self.voting_settings.prevent_self_vote
                and isinstance(voter, AuthenticatedVoter)
                and profile.user_id == voter.user_id
            ):
                logfire.warn(
                    "Self vote attempt",
                    user_id=str(voter.user_id),
                    profile_id=str(profile_id),
                )
                raise VoteRejectedError(
                    VoteRejection.SELF_VOTE,
                    await self.remaining_votes_today(voter),
                    "You cannot vote for your own profile",
                )

            async with self.vote_repository.voter_lock(voter.key):
                now = self.clock.now()
                today = utc_day(now)

                used = await self.vote_repository.count_by_voter_on_day(
                    voter.key, today
                )
                if used >= self.daily_cap:
                    logfire.warn(
                        "Daily vote quota exceeded", voter_key=voter.key, used=used
                    )
                    raise VoteRejectedError(
                        VoteRejection.DAILY_QUOTA_EXCEEDED,
                        0,
                        f"No votes left today ({self.daily_cap} per day)",
                    )

                if await self.vote_repository.exists_for_voter_and_profile_on_day(
                    voter.key, profile_id, today
                ):
                    logfire.warn(
                        "Repeat vote on same day",
                        voter_key=voter.key,
                        profile_id=str(profile_id),
                    )
                    raise self._already_voted(used)

                vote = Vote(
                    id=VoteId(uuid4()),
                    profile_id=profile_id,
                    voter_key=voter.key,
                    created_at=now,
                    vote_day=today,
                )
                try:
                    saved = await self.vote_repository.save(vote)
                except IntegrityError:
                    logfire.warn(
                        "Duplicate vote rejected by storage",
                        voter_key=voter.key,
                        profile_id=str(profile_id),
                    )
                    raise self._already_voted(used)

            try:
                updated = await self.profile_service.resync_votes(profile_id)
            except NotFoundError:
                # Profile deleted between the existence check and the resync
                raise VoteRejectedError(
                    VoteRejection.NOT_FOUND,
                    await self.remaining_votes_today(voter),
                    "Profile not found",
                )
            remaining = self.daily_cap - used - 1

            logfire.info(
                "Vote accepted",
                voter_key=voter.key,
                profile_id=str(profile_id),
                votes=updated.votes,
                remaining_votes=remaining,
            )
            return VoteReceipt(vote=saved, profile=updated, remaining_votes=remaining)

    async def today_votes(self, voter: VoterIdentity) -> int:
        """Count the votes a voter has cast today.

        Args:
            voter: Voter identity

        Returns:
            Number of votes cast since UTC midnight
        """
        today = utc_day(self.clock.now())
        return await self.vote_repository.count_by_voter_on_day(voter.key, today)

    async def remaining_votes_today(self, voter: VoterIdentity) -> int:
        """Get how many votes a voter may still cast today.

        Args:
            voter: Voter identity

        Returns:
            Remaining votes, never negative
        """
        return max(0, self.daily_cap - await self.today_votes(voter))

    def _already_voted(self, used: int) -> VoteRejectedError:
        return VoteRejectedError(
            VoteRejection.ALREADY_VOTED_TODAY,
            max(0, self.daily_cap - used),
            "You already voted for this profile today, come back tomorrow",
        )
