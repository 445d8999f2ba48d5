import uuid
from datetime import datetime

import sqlalchemy as sa
import sqlalchemy.orm as so

from fleet_service.constants.fleet import CreationOrigin
from fleet_service.utils import utcnow


class SoftDeleteMixin:
    """
    Identity, provenance and soft-delete columns shared by every fleet entity.

    Rows are never removed through the API: deletion flips ``deleted`` and stamps
    ``deleted_at``/``deletion_origin``.
    """

    id: so.Mapped[str] = so.mapped_column(
        sa.String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )

    created_by: so.Mapped[str | None] = so.mapped_column(sa.String(255))
    updated_by: so.Mapped[str | None] = so.mapped_column(sa.String(255))
    creation_origin: so.Mapped[str] = so.mapped_column(
        sa.String(20),
        nullable=False,
        default=CreationOrigin.INVENTORY.value,
        comment="inventory, manual",
    )

    deleted: so.Mapped[bool] = so.mapped_column(
        sa.Boolean, nullable=False, default=False, index=True
    )
    deleted_at: so.Mapped[datetime | None] = so.mapped_column(
        sa.DateTime(timezone=True), nullable=True
    )
    deletion_origin: so.Mapped[str | None] = so.mapped_column(
        sa.String(20), nullable=True, comment="manual"
    )

    created_at: so.Mapped[datetime] = so.mapped_column(
        sa.DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: so.Mapped[datetime] = so.mapped_column(
        sa.DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )
