import sqlalchemy as sa
import sqlalchemy.orm as so

from fleet_service.constants.fleet import Status
from fleet_service.core.database import Base
from fleet_service.models.mixins import SoftDeleteMixin


class Transponder(SoftDeleteMixin, Base):
    """Represents a transponder, frequencies and bandwidth in MHz"""

    __tablename__ = "transponders"

    name: so.Mapped[str] = so.mapped_column(sa.String(255), nullable=False)
    status: so.Mapped[str] = so.mapped_column(
        sa.String(20), nullable=False, default=Status.ACTIVE.value
    )
    ul_polarization: so.Mapped[str] = so.mapped_column(
        sa.String(10), nullable=False, comment="V, H, LHCP, RHCP"
    )
    dl_polarization: so.Mapped[str] = so.mapped_column(
        sa.String(10), nullable=False, comment="V, H, LHCP, RHCP"
    )
    ul_frequency: so.Mapped[float] = so.mapped_column(sa.Float, nullable=False)
    dl_frequency: so.Mapped[float] = so.mapped_column(sa.Float, nullable=False)
    bandwidth: so.Mapped[float] = so.mapped_column(sa.Float, nullable=False)
    company: so.Mapped[str | None] = so.mapped_column(sa.String(255))

    __table_args__ = (
        sa.CheckConstraint("ul_frequency > 0", name="ck_transponders_ul_frequency"),
        sa.CheckConstraint("dl_frequency > 0", name="ck_transponders_dl_frequency"),
        sa.CheckConstraint("bandwidth > 0", name="ck_transponders_bandwidth"),
    )
