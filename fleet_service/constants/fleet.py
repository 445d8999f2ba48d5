import enum

from pydantic import BaseModel, ConfigDict


class Status(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class CreationOrigin(str, enum.Enum):
    INVENTORY = "inventory"
    MANUAL = "manual"


class DeletionOrigin(str, enum.Enum):
    MANUAL = "manual"


class LinkDirection(str, enum.Enum):
    UPLINK = "uplink"
    DOWNLINK = "downlink"


class Polarization(str, enum.Enum):
    V = "V"  # linear vertical
    H = "H"  # linear horizontal
    LHCP = "LHCP"  # left-handed circular
    RHCP = "RHCP"  # right-handed circular


class FleetRules(BaseModel):
    """
    Process-wide schema rules shared by the request schemas and the repositories.

    Frozen: read it through the module level ``RULES`` instance.
    """

    model_config = ConfigDict(frozen=True)

    name_min_length: int = 3
    name_max_length: int = 255
    name_pattern: str = r"^[A-Za-z0-9\- ]+$"
    text_max_length: int = 255

    default_orbit_latitude: float = 0
    default_orbit_inclination: float = 0
    default_orbit_height_km: float = 35786.063  # geostationary

    satellite_summary_fields: tuple[str, ...] = ("id", "name", "slug", "orbit")
    beam_summary_fields: tuple[str, ...] = ("id", "name", "link_direction")
    transponder_summary_fields: tuple[str, ...] = ("id", "name")


RULES = FleetRules()
