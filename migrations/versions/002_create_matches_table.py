"""create matches table

Revision ID: 002
Revises: 001
Create Date: 2025-07-11 00:01:00.000000

Adds the fixture calendar. Only match_date takes part in the missed-matches
computation.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "matches",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("match_date", sa.Date(), nullable=False),
        sa.Column("opponent", sa.String(255), nullable=True),
        sa.Column("competition", sa.String(100), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_matches_match_date", "matches", ["match_date"])


def downgrade() -> None:
    op.drop_index("ix_matches_match_date", table_name="matches")
    op.drop_table("matches")
