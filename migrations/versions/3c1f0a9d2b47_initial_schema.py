"""initial_schema

Create the schema for the Nuôi DEV vote service:
- Profiles (developer cards with denormalized vote count and rank)
- Votes (append-only ledger, one vote per voter per profile per UTC day)

Revision ID: 3c1f0a9d2b47
Revises:
Create Date: 2025-01-12 20:14:05.512930

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # PROFILES table
    # ========================================================================
    op.create_table(
        "profiles",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("nickname", sa.String(length=100), server_default="", nullable=False),
        sa.Column("avatar", sa.Text(), nullable=False),
        sa.Column("bio", sa.Text(), server_default="", nullable=False),
        sa.Column(
            "skills",
            postgresql.ARRAY(sa.Text()),
            server_default="{}",
            nullable=False,
        ),
        sa.Column(
            "fun_facts",
            postgresql.ARRAY(sa.Text()),
            server_default="{}",
            nullable=False,
        ),
        sa.Column("catchphrase", sa.Text(), server_default="", nullable=False),
        sa.Column("mood", sa.String(length=20), server_default="happy", nullable=False),
        sa.Column("level", sa.Integer(), server_default="1", nullable=False),
        sa.Column("xp", sa.Integer(), server_default="0", nullable=False),
        sa.Column("votes", sa.Integer(), server_default="0", nullable=False),
        sa.Column("rank", sa.String(length=20), server_default="bronze", nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.CheckConstraint("votes >= 0", name="votes_non_negative"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_profiles_votes", "profiles", [sa.text("votes DESC")])
    op.create_index("idx_profiles_user_id", "profiles", ["user_id"])

    # ========================================================================
    # VOTES table (append-only ledger)
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("profile_id", sa.UUID(), nullable=False),
        sa.Column("voter_key", sa.String(length=160), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column("vote_day", sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        # Closes the check-then-insert race: a second vote for the same
        # profile on the same UTC day fails at the database.
        sa.UniqueConstraint(
            "voter_key", "profile_id", "vote_day", name="unique_vote_per_day"
        ),
    )
    op.create_index("idx_votes_profile_id", "votes", ["profile_id"])
    op.create_index("idx_votes_voter_day", "votes", ["voter_key", "vote_day"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_votes_voter_day", table_name="votes")
    op.drop_index("idx_votes_profile_id", table_name="votes")
    op.drop_table("votes")
    op.drop_index("idx_profiles_user_id", table_name="profiles")
    op.drop_index("idx_profiles_votes", table_name="profiles")
    op.drop_table("profiles")
