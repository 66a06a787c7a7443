"""SQLAlchemy table definitions for Nuôi DEV.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# PROFILES TABLE
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(100), nullable=False),
    Column("nickname", String(100), nullable=False, server_default=""),
    Column("avatar", Text, nullable=False),
    Column("bio", Text, nullable=False, server_default=""),
    Column("skills", ARRAY(Text), nullable=False, server_default="{}"),
    Column("fun_facts", ARRAY(Text), nullable=False, server_default="{}"),
    Column("catchphrase", Text, nullable=False, server_default=""),
    Column("mood", String(20), nullable=False, server_default="happy"),
    Column("level", Integer, nullable=False, server_default="1"),
    Column("xp", Integer, nullable=False, server_default="0"),
    Column("votes", Integer, nullable=False, server_default="0"),  # Derived from votes
    Column("rank", String(20), nullable=False, server_default="bronze"),
    Column("user_id", UUID, nullable=True),  # Owning account
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("votes >= 0", name="votes_non_negative"),
)

Index("idx_profiles_votes", profiles_table.c.votes.desc())
Index("idx_profiles_user_id", profiles_table.c.user_id)

# ============================================================================
# VOTES TABLE (append-only ledger)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "profile_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("voter_key", String(160), nullable=False),  # anon:<token> / user:<uuid>
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("vote_day", Date, nullable=False),  # UTC day of created_at
    UniqueConstraint(
        "voter_key", "profile_id", "vote_day", name="unique_vote_per_day"
    ),
)

Index("idx_votes_profile_id", votes_table.c.profile_id)
Index("idx_votes_voter_day", votes_table.c.voter_key, votes_table.c.vote_day)
