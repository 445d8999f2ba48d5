import sqlalchemy as sa
import sqlalchemy.orm as so
from sqlalchemy.dialects.postgresql import JSONB

from fleet_service.constants.fleet import Status
from fleet_service.core.database import Base
from fleet_service.models.mixins import SoftDeleteMixin

# uniqueness only applies to live rows, a soft-deleted satellite frees its name and slug
NOT_DELETED = sa.text("NOT deleted")


class Satellite(SoftDeleteMixin, Base):
    """Represents a satellite of the fleet"""

    __tablename__ = "satellites"

    name: so.Mapped[str] = so.mapped_column(
        sa.String(255), nullable=False, comment="short name or satellite code"
    )
    slug: so.Mapped[str] = so.mapped_column(
        sa.String(255), nullable=False, comment="extended name"
    )
    # longitude, latitude, inclination, height (km)
    orbit: so.Mapped[dict] = so.mapped_column(
        sa.JSON().with_variant(JSONB, "postgresql"), nullable=False
    )
    status: so.Mapped[str] = so.mapped_column(
        sa.String(20), nullable=False, default=Status.ACTIVE.value
    )
    company: so.Mapped[str | None] = so.mapped_column(sa.String(255))

    __table_args__ = (
        sa.Index(
            "uq_satellites_name_not_deleted",
            "name",
            unique=True,
            postgresql_where=NOT_DELETED,
            sqlite_where=NOT_DELETED,
        ),
        sa.Index(
            "uq_satellites_slug_not_deleted",
            "slug",
            unique=True,
            postgresql_where=NOT_DELETED,
            sqlite_where=NOT_DELETED,
        ),
    )
