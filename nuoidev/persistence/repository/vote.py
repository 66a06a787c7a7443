"""PostgreSQL implementation of Vote repository."""

from contextlib import asynccontextmanager
from datetime import date
from typing import AsyncIterator

from sqlalchemy import and_, exists, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from nuoidev.domain.model import Vote
from nuoidev.domain.repository import VoteRepository
from nuoidev.domain.value import ProfileId
from nuoidev.persistence.mappers import row_to_vote, vote_to_dict
from nuoidev.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, vote: Vote) -> Vote:
        """Append a vote; unique_vote_per_day rejects duplicates.

        The insert runs in a savepoint so a rejected duplicate leaves the
        request transaction (and the voter lock it holds) usable.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return vote

    async def count_by_profile(self, profile_id: ProfileId) -> int:
        """Count every vote ever cast for a profile."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.profile_id == profile_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_voter_on_day(self, voter_key: str, day: date) -> int:
        """Count the votes a voter cast on a given UTC day."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(
                and_(
                    votes_table.c.voter_key == voter_key,
                    votes_table.c.vote_day == day,
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def exists_for_voter_and_profile_on_day(
        self, voter_key: str, profile_id: ProfileId, day: date
    ) -> bool:
        """Check whether a voter already voted for a profile on a given day."""
        stmt = select(
            exists().where(
                and_(
                    votes_table.c.voter_key == voter_key,
                    votes_table.c.profile_id == profile_id,
                    votes_table.c.vote_day == day,
                )
            )
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def find_by_voter(self, voter_key: str) -> list[Vote]:
        """Find all votes cast by a voter, oldest first."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.voter_key == voter_key)
            .order_by(votes_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    @asynccontextmanager
    async def voter_lock(self, voter_key: str) -> AsyncIterator[None]:
        """Take a transaction-scoped advisory lock keyed by the voter.

        The lock is released when the request transaction commits or rolls
        back, so it covers the append and the profile resync that follows.
        """
        await self.session.execute(
            select(func.pg_advisory_xact_lock(func.hashtextextended(voter_key, 0)))
        )
        yield
