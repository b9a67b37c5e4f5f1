"""create players table

Revision ID: 001
Revises:
Create Date: 2025-07-11 00:00:00.000000

Adds the players table. Each row is one injury episode; a player with
several injuries has several rows sharing the same name.
See also: src/entities/injury_episode.py (InjuryEpisode entity)
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the players table and indexes.

    Indexes on name, status and the two dates back the visitor list
    (status = injured), the recovered report (recovery_date range) and
    per-player lookups.
    """
    op.create_table(
        "players",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("photo_url", sa.String(500), nullable=True),
        sa.Column("injury_type", sa.String(100), nullable=True),
        sa.Column("injury_date", sa.Date(), nullable=True),
        sa.Column("recovery_date", sa.Date(), nullable=True),
        sa.Column(
            "status", sa.String(20), nullable=False, server_default="injured"
        ),
        sa.Column("article_link", sa.String(500), nullable=True),
        sa.Column("injury_context", sa.String(255), nullable=True),
        sa.Column("club_estimation", sa.String(100), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index("ix_players_name", "players", ["name"])
    op.create_index("ix_players_status", "players", ["status"])
    op.create_index("ix_players_injury_date", "players", ["injury_date"])
    op.create_index("ix_players_recovery_date", "players", ["recovery_date"])


def downgrade() -> None:
    """Drop the players table and its indexes."""
    op.drop_index("ix_players_recovery_date", table_name="players")
    op.drop_index("ix_players_injury_date", table_name="players")
    op.drop_index("ix_players_status", table_name="players")
    op.drop_index("ix_players_name", table_name="players")
    op.drop_table("players")
