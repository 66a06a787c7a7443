"""PostgreSQL implementation of Profile repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from nuoidev.domain.model import Profile
from nuoidev.domain.repository import ProfileRepository
from nuoidev.domain.value import ProfileId, Rank
from nuoidev.persistence.mappers import profile_to_dict, row_to_profile
from nuoidev.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID."""
        stmt = select(profiles_table).where(profiles_table.c.id == profile_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create)."""
        stmt = insert(profiles_table).values(**profile_to_dict(profile))
        await self.session.execute(stmt)
        await self.session.flush()
        return profile

    async def update_votes_and_rank(
        self,
        profile_id: ProfileId,
        votes: int,
        rank: Rank,
        updated_at: datetime,
    ) -> Optional[Profile]:
        """Overwrite the denormalized vote count and rank."""
        stmt = (
            profiles_table.update()
            .where(profiles_table.c.id == profile_id)
            .values(
                votes=votes,
                rank=rank.value,
                updated_at=updated_at,
            )
            .returning(*profiles_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_profile(row._asdict()) if row else None

    async def find_top(self, limit: int) -> list[Profile]:
        """Find the most voted profiles."""
        stmt = (
            select(profiles_table)
            .order_by(profiles_table.c.votes.desc(), profiles_table.c.created_at)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_profile(row._asdict()) for row in result.fetchall()]
