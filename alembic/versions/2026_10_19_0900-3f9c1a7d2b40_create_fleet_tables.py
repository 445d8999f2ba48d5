"""create fleet tables

Revision ID: 3f9c1a7d2b40
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f9c1a7d2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

NOT_DELETED = sa.text("NOT deleted")


def record_columns() -> list[sa.Column]:
    """Identity, provenance and soft-delete columns shared by every table."""
    return [
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("created_by", sa.String(255), nullable=True),
        sa.Column("updated_by", sa.String(255), nullable=True),
        sa.Column(
            "creation_origin",
            sa.String(20),
            nullable=False,
            comment="inventory, manual",
        ),
        sa.Column("deleted", sa.Boolean(), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("deletion_origin", sa.String(20), nullable=True, comment="manual"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Create satellites, beams and transponders."""
    op.create_table(
        "satellites",
        *record_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("orbit", sa.JSON().with_variant(JSONB, "postgresql"), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("company", sa.String(255), nullable=True),
    )
    op.create_index("ix_satellites_deleted", "satellites", ["deleted"])
    op.create_index(
        "uq_satellites_name_not_deleted",
        "satellites",
        ["name"],
        unique=True,
        postgresql_where=NOT_DELETED,
        sqlite_where=NOT_DELETED,
    )
    op.create_index(
        "uq_satellites_slug_not_deleted",
        "satellites",
        ["slug"],
        unique=True,
        postgresql_where=NOT_DELETED,
        sqlite_where=NOT_DELETED,
    )

    op.create_table(
        "beams",
        *record_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column(
            "link_direction", sa.String(20), nullable=False, comment="uplink, downlink"
        ),
        sa.Column("pattern", sa.String(255), nullable=True),
    )
    op.create_index("ix_beams_deleted", "beams", ["deleted"])

    op.create_table(
        "transponders",
        *record_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column(
            "ul_polarization", sa.String(10), nullable=False, comment="V, H, LHCP, RHCP"
        ),
        sa.Column(
            "dl_polarization", sa.String(10), nullable=False, comment="V, H, LHCP, RHCP"
        ),
        sa.Column("ul_frequency", sa.Float(), nullable=False),
        sa.Column("dl_frequency", sa.Float(), nullable=False),
        sa.Column("bandwidth", sa.Float(), nullable=False),
        sa.Column("company", sa.String(255), nullable=True),
        sa.CheckConstraint("ul_frequency > 0", name="ck_transponders_ul_frequency"),
        sa.CheckConstraint("dl_frequency > 0", name="ck_transponders_dl_frequency"),
        sa.CheckConstraint("bandwidth > 0", name="ck_transponders_bandwidth"),
    )
    op.create_index("ix_transponders_deleted", "transponders", ["deleted"])


def downgrade() -> None:
    """Drop the fleet tables."""
    op.drop_index("ix_transponders_deleted", table_name="transponders")
    op.drop_table("transponders")
    op.drop_index("ix_beams_deleted", table_name="beams")
    op.drop_table("beams")
    op.drop_index("uq_satellites_slug_not_deleted", table_name="satellites")
    op.drop_index("uq_satellites_name_not_deleted", table_name="satellites")
    op.drop_index("ix_satellites_deleted", table_name="satellites")
    op.drop_table("satellites")
