import sqlalchemy as sa
import sqlalchemy.orm as so

from fleet_service.core.database import Base
from fleet_service.models.mixins import SoftDeleteMixin


class Beam(SoftDeleteMixin, Base):
    """Represents an antenna beam, names are labels and may repeat"""

    __tablename__ = "beams"

    name: so.Mapped[str] = so.mapped_column(sa.String(255), nullable=False)
    link_direction: so.Mapped[str] = so.mapped_column(
        sa.String(20), nullable=False, comment="uplink, downlink"
    )
    pattern: so.Mapped[str | None] = so.mapped_column(sa.String(255))
