from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from fleet_service.constants.fleet import (
    RULES,
    CreationOrigin,
    DeletionOrigin,
    LinkDirection,
    Polarization,
    Status,
)
from fleet_service.utils import (
    Latitude,
    Longitude,
    Name,
    Number,
    PositiveNumber,
    Text,
)


class RequestSchema(BaseModel):
    """Incoming payloads: camelCase on the wire, snake_case once dumped."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
    )


class RecordSchema(BaseModel):
    """Stored records as returned to clients."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class Orbit(RequestSchema):
    longitude: Longitude
    latitude: Latitude = RULES.default_orbit_latitude
    inclination: Number = RULES.default_orbit_inclination
    height: PositiveNumber = Field(
        RULES.default_orbit_height_km, description="Orbit height in km"
    )


class OrbitUpdate(RequestSchema):
    longitude: Longitude | None = None
    latitude: Latitude | None = None
    inclination: Number | None = None
    height: PositiveNumber | None = None


class AuditCreate(RequestSchema):
    created_by: Text | None = None
    updated_by: Text | None = None
    creation_origin: CreationOrigin = CreationOrigin.INVENTORY


class RecordRead(RecordSchema):
    id: str
    created_by: str | None = None
    updated_by: str | None = None
    creation_origin: CreationOrigin
    deleted: bool
    deleted_at: datetime | None = None
    deletion_origin: DeletionOrigin | None = None
    created_at: datetime
    updated_at: datetime


# ---- satellites ----


class SatelliteCreate(AuditCreate):
    name: Name = Field(description="Short satellite code, unique among live satellites")
    slug: Name = Field(description="Long satellite name, unique among live satellites")
    orbit: Orbit
    status: Status = Status.ACTIVE
    company: Text | None = None


class SatelliteUpdate(RequestSchema):
    """Partial update; ``id``, ``name`` and ``slug`` are accepted only when unchanged."""

    id: str | None = None
    name: Name | None = None
    slug: Name | None = None
    orbit: OrbitUpdate | None = None
    status: Status | None = None
    company: Text | None = None
    updated_by: Text | None = None


class SatelliteRead(RecordRead):
    name: str
    slug: str
    orbit: Orbit
    status: Status
    company: str | None = None


# ---- beams ----


class BeamCreate(AuditCreate):
    name: Name
    link_direction: LinkDirection
    pattern: Text | None = None


class BeamUpdate(RequestSchema):
    id: str | None = None
    name: Name | None = None
    link_direction: LinkDirection | None = None
    pattern: Text | None = None
    updated_by: Text | None = None


class BeamRead(RecordRead):
    name: str
    link_direction: LinkDirection
    pattern: str | None = None


# ---- transponders ----


class TransponderCreate(AuditCreate):
    name: Name
    status: Status = Status.ACTIVE
    ul_polarization: Polarization = Field(alias="UL_polarization")
    dl_polarization: Polarization = Field(alias="DL_polarization")
    ul_frequency: PositiveNumber = Field(alias="UL_frequency", description="MHz")
    dl_frequency: PositiveNumber = Field(alias="DL_frequency", description="MHz")
    bandwidth: PositiveNumber = Field(description="MHz")
    company: Text | None = None


class TransponderUpdate(RequestSchema):
    id: str | None = None
    name: Name | None = None
    status: Status | None = None
    ul_polarization: Polarization | None = Field(None, alias="UL_polarization")
    dl_polarization: Polarization | None = Field(None, alias="DL_polarization")
    ul_frequency: PositiveNumber | None = Field(None, alias="UL_frequency")
    dl_frequency: PositiveNumber | None = Field(None, alias="DL_frequency")
    bandwidth: PositiveNumber | None = None
    company: Text | None = None
    updated_by: Text | None = None


class TransponderRead(RecordRead):
    name: str
    status: Status
    ul_polarization: Polarization = Field(alias="UL_polarization")
    dl_polarization: Polarization = Field(alias="DL_polarization")
    ul_frequency: float = Field(alias="UL_frequency")
    dl_frequency: float = Field(alias="DL_frequency")
    bandwidth: float
    company: str | None = None


# ---- responses ----


class SatelliteId(BaseModel):
    id: str


class SatelliteDeleted(BaseModel):
    """Confirmation of a soft delete, with the record as stored."""

    message: str
    satellite: SatelliteRead


class BeamDeleted(BaseModel):
    message: str
    beam: BeamRead


class TransponderDeleted(BaseModel):
    message: str
    transponder: TransponderRead
