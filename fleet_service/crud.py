import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from fleet_service.constants.fleet import RULES, DeletionOrigin
from fleet_service.core.exceptions import ConflictError, StorageError
from fleet_service.models import Beam, Satellite, Transponder
from fleet_service.models.schemas import (
    BeamCreate,
    BeamRead,
    SatelliteCreate,
    SatelliteRead,
    TransponderCreate,
    TransponderRead,
)
from fleet_service.utils import utcnow, validate_record

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", Satellite, Beam, Transponder)


class SoftDeleteRepository(Generic[ModelT]):
    """
    Data access for one soft-deletable entity.

    Every read and write is scoped to rows with ``deleted = false`` unless the caller
    passes ``include_deleted=True``. Filters are plain ``{column: value}`` mappings.

    Records leave the repository already projected: a JSON ready dict with wire
    (camelCase) keys, either complete or reduced to the entity's summary fields.
    """

    def __init__(
        self,
        model: type[ModelT],
        *,
        label: str,
        create_schema: type[BaseModel],
        read_schema: type[BaseModel],
        summary_fields: tuple[str, ...],
        immutable_fields: tuple[tuple[str, ...], ...],
        unique_fields: tuple[str, ...] = (),
    ):
        self.model = model
        self.label = label
        self.create_schema = create_schema
        self.read_schema = read_schema
        self.summary_fields = summary_fields
        self.immutable_fields = immutable_fields
        self.unique_fields = unique_fields

    def _select(self, filters: dict[str, Any], include_deleted: bool) -> Select:
        stmt = select(self.model).filter_by(**filters)
        if not include_deleted:
            stmt = stmt.where(self.model.deleted.is_(False))
        return stmt

    def _wire_name(self, field: str) -> str:
        return self.read_schema.model_fields[field].alias or field

    def project(self, record: ModelT, detailed: bool = False) -> dict[str, Any]:
        include = None if detailed else set(self.summary_fields)
        return self.read_schema.model_validate(record).model_dump(
            mode="json", by_alias=True, include=include
        )

    def get(
        self, db: Session, filters: dict[str, Any], *, include_deleted: bool = False
    ) -> ModelT | None:
        try:
            return db.execute(self._select(filters, include_deleted)).scalars().first()
        except SQLAlchemyError as e:
            logger.exception(f"Failed to query {self.label} with {filters}")
            raise StorageError(
                f"An error has occurred while requesting the {self.label} from database. "
                f"Details: {e}"
            ) from e

    def find_one(
        self,
        db: Session,
        filters: dict[str, Any],
        *,
        detailed: bool = False,
        include_deleted: bool = False,
    ) -> dict[str, Any] | None:
        record = self.get(db, filters, include_deleted=include_deleted)
        if record is None:
            return None
        return self.project(record, detailed)

    def find_many(
        self,
        db: Session,
        filters: dict[str, Any] | None = None,
        *,
        detailed: bool = False,
        include_deleted: bool = False,
    ) -> list[dict[str, Any]]:
        stmt = self._select(filters or {}, include_deleted).order_by(
            self.model.created_at
        )
        try:
            records = db.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            logger.exception(f"Failed to list {self.label}s")
            raise StorageError(
                f"An error has occurred while requesting {self.label}s from database. "
                f"Details: {e}"
            ) from e
        return [self.project(record, detailed) for record in records]

    def create(self, db: Session, data: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a validated record.

        The duplicate pre-check only gives a friendly early answer; the partial unique
        index is what actually guards concurrent inserts, and its violation is reported
        the same way.
        """
        self._check_unique(db, data)
        record = self.model(**data)
        db.add(record)
        self._commit(db, "saving")
        db.refresh(record)
        logger.info(f"Created {self.label}: {record.id} - {record.name}")
        return self.project(record, detailed=True)

    def update_one(
        self,
        db: Session,
        filters: dict[str, Any],
        patch: dict[str, Any],
        *,
        include_deleted: bool = False,
    ) -> dict[str, Any] | None:
        """
        Apply a partial update to the first record matching ``filters``.

        Immutable fields are compared before anything is written; nested objects
        (``orbit``) are merged key by key and the merged record is validated again as
        a whole. Returns the complete updated record, or None when nothing matches.
        """
        record = self.get(db, filters, include_deleted=include_deleted)
        if record is None:
            return None

        # null on an immutable field is the same as leaving it out
        patch = {
            field: value
            for field, value in patch.items()
            if value is not None or not self._is_immutable(field)
        }
        self._check_immutable(record, patch)
        validated = validate_record(self.create_schema, self._merge(record, patch))
        values = validated.model_dump()
        for field in patch:
            if field in values:
                setattr(record, field, values[field])

        self._commit(db, "updating")
        db.refresh(record)
        logger.info(f"Updated {self.label} {record.id}: {sorted(patch)}")
        return self.project(record, detailed=True)

    def soft_delete(
        self,
        db: Session,
        filters: dict[str, Any],
        origin: DeletionOrigin = DeletionOrigin.MANUAL,
    ) -> dict[str, Any] | None:
        record = self.get(db, filters)
        if record is None:
            return None
        record.deleted = True
        record.deleted_at = utcnow()
        record.deletion_origin = origin.value
        self._commit(db, "deleting")
        db.refresh(record)
        logger.info(f"Soft deleted {self.label} {record.id} ({origin.value})")
        return self.project(record, detailed=True)

    def _merge(self, record: ModelT, patch: dict[str, Any]) -> dict[str, Any]:
        merged = {
            field: getattr(record, field) for field in self.create_schema.model_fields
        }
        for field, value in patch.items():
            if field not in merged:
                continue
            current = merged[field]
            if isinstance(current, dict) and isinstance(value, dict):
                value = {**current, **value}
            merged[field] = value
        return merged

    def _is_immutable(self, field: str) -> bool:
        return any(field in group for group in self.immutable_fields)

    def _check_immutable(self, record: ModelT, patch: dict[str, Any]) -> None:
        for group in self.immutable_fields:
            if any(f in patch and patch[f] != getattr(record, f) for f in group):
                names = " or ".join(f"'{self._wire_name(f)}'" for f in group)
                verb = "They are" if len(group) > 1 else "It is"
                logger.warning(
                    f"Rejected change of immutable {names} on {self.label} {record.id}"
                )
                raise ConflictError(
                    f"{self.label.capitalize()} {names} cannot be modified. {verb} immutable."
                )

    def _duplicate_message(self) -> str:
        names = " or ".join(f"'{self._wire_name(f)}'" for f in self.unique_fields)
        return f"The provided {self.label} {names} already exists in database."

    def _check_unique(self, db: Session, data: dict[str, Any]) -> None:
        if not self.unique_fields:
            return
        conditions = [
            getattr(self.model, f) == data[f] for f in self.unique_fields if f in data
        ]
        stmt = select(self.model.id).where(
            or_(*conditions), self.model.deleted.is_(False)
        )
        try:
            duplicate = db.execute(stmt).first()
        except SQLAlchemyError as e:
            logger.exception(f"Failed to check {self.label} uniqueness")
            raise StorageError(
                f"An error has occurred while requesting the {self.label} from database. "
                f"Details: {e}"
            ) from e
        if duplicate is not None:
            logger.warning(f"Duplicate {self.label} rejected: {duplicate.id}")
            raise ConflictError(self._duplicate_message())

    def _commit(self, db: Session, action: str) -> None:
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.warning(f"Integrity error while {action} {self.label}: {e.orig}")
            if self.unique_fields:
                raise ConflictError(self._duplicate_message()) from e
            raise ConflictError(
                f"The {self.label} conflicts with stored data. Details: {e.orig}"
            ) from e
        except SQLAlchemyError as e:
            db.rollback()
            logger.exception(f"Failed {action} {self.label}")
            raise StorageError(
                f"An error has occurred while {action} the {self.label} in database. "
                f"Details: {e}"
            ) from e


satellites: SoftDeleteRepository[Satellite] = SoftDeleteRepository(
    Satellite,
    label="satellite",
    create_schema=SatelliteCreate,
    read_schema=SatelliteRead,
    summary_fields=RULES.satellite_summary_fields,
    immutable_fields=(("id",), ("name", "slug")),
    unique_fields=("name", "slug"),
)

# beam names are plain labels: neither unique nor immutable
beams: SoftDeleteRepository[Beam] = SoftDeleteRepository(
    Beam,
    label="beam",
    create_schema=BeamCreate,
    read_schema=BeamRead,
    summary_fields=RULES.beam_summary_fields,
    immutable_fields=(("id",), ("link_direction",)),
)

transponders: SoftDeleteRepository[Transponder] = SoftDeleteRepository(
    Transponder,
    label="transponder",
    create_schema=TransponderCreate,
    read_schema=TransponderRead,
    summary_fields=RULES.transponder_summary_fields,
    immutable_fields=(("id",), ("name",), ("ul_polarization", "dl_polarization")),
)
