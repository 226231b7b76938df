"""Create ships table

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-17 10:02:11.482913

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "ships",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("planet", sa.String(length=50), nullable=False),
        sa.Column(
            "ship_type",
            sa.Enum(
                "TRANSPORT",
                "MILITARY",
                "MERCHANT",
                name="ship_type",
                native_enum=False,
                length=16,
            ),
            nullable=False,
        ),
        sa.Column("prod_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_used", sa.Boolean(), nullable=False),
        sa.Column("speed", sa.Float(), nullable=False),
        sa.Column("crew_size", sa.Integer(), nullable=False),
        sa.Column("rating", sa.Float(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_ships_speed", "ships", ["speed"])
    op.create_index("ix_ships_rating", "ships", ["rating"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_ships_rating", table_name="ships")
    op.drop_index("ix_ships_speed", table_name="ships")
    op.drop_table("ships")
