"""Create offers table

Revision ID: 3c1f0b6e9a24
Revises:
Create Date: 2026-10-18 15:02:11.418305

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3c1f0b6e9a24"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "offers",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("data", sa.Text(), nullable=False),
        sa.Column("most_specific_region_id", sa.Integer(), nullable=False),
        sa.Column("start_date", sa.BigInteger(), nullable=False),
        sa.Column("end_date", sa.BigInteger(), nullable=False),
        sa.Column("number_seats", sa.Integer(), nullable=False),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.Column("car_type", sa.String(length=10), nullable=False),
        sa.Column("has_vollkasko", sa.Boolean(), nullable=False),
        sa.Column("free_kilometers", sa.Integer(), nullable=False),
    )
    op.create_index(
        "ix_offers_region_start_end",
        "offers",
        ["most_specific_region_id", "start_date", "end_date"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_offers_region_start_end", table_name="offers")
    op.drop_table("offers")
