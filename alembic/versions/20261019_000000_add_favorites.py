"""Add user favorites

Revision ID: 20261019_000000
Revises: 20260301_000000
Create Date: 2026-10-19 00:00:00.000000

Creates the favorites table linking signed-in users to the wallpapers they
liked.

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261019_000000"
down_revision: Union[str, None] = "20260301_000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "favorites",
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("wallpaper_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("user_id", "wallpaper_id"),
        sa.ForeignKeyConstraint(["wallpaper_id"], ["wallpapers.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_favorites_wallpaper_id", "favorites", ["wallpaper_id"])


def downgrade() -> None:
    op.drop_index("ix_favorites_wallpaper_id", table_name="favorites")
    op.drop_table("favorites")
