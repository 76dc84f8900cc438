from dataclasses import dataclass
from datetime import date, time
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from birthchart.domain.zodiac.signs import ZodiacSign


# ─────────────────────────────────────────────
# Inputs
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class BirthInput:
    """
    Immutable, already-parsed birth details.

    ``time_of_birth`` None means the birth time is unknown (noon is used).
    """
    date_of_birth: date
    time_of_birth: Optional[time] = None
    city_of_birth: str = ""


@dataclass(frozen=True)
class Origin:
    """
    Astronomical origin handed to the ephemeris provider.

    Date and time are local civil time at the given coordinates.
    """
    year: int
    month: int
    day: int
    hour: int
    minute: int
    latitude: float
    longitude: float


@dataclass(frozen=True)
class EphemerisConfig:
    house_system: str = "placidus"
    zodiac: str = "tropical"
    aspect_types: Tuple[str, ...] = ("major",)


# Only sign placements are consumed, so the configuration never varies.
CHART_CONFIG = EphemerisConfig()

# Body key -> sign label, exactly as the provider reported it.
RawPlacements = Dict[str, Optional[str]]


# ─────────────────────────────────────────────
# Results
# ─────────────────────────────────────────────

class Coordinates(BaseModel):
    lat: float
    lng: float


class PlacementSet(BaseModel):
    """
    Canonical signs produced by a successful ephemeris computation.
    """
    sun: ZodiacSign
    moon: ZodiacSign
    rising: ZodiacSign
    mercury: Optional[ZodiacSign] = None
    venus: Optional[ZodiacSign] = None
    mars: Optional[ZodiacSign] = None
    jupiter: Optional[ZodiacSign] = None
    saturn: Optional[ZodiacSign] = None
    north_node: Optional[ZodiacSign] = None
    south_node: Optional[ZodiacSign] = None


class BirthChartResult(BaseModel):
    """
    Chart returned to callers.

    Serialized with camelCase keys; unset optional placements are omitted
    by ``to_wire``.
    """
    model_config = ConfigDict(populate_by_name=True)

    sun: ZodiacSign
    moon: ZodiacSign
    rising: ZodiacSign
    mercury: Optional[ZodiacSign] = None
    venus: Optional[ZodiacSign] = None
    mars: Optional[ZodiacSign] = None
    jupiter: Optional[ZodiacSign] = None
    saturn: Optional[ZodiacSign] = None
    north_node: Optional[ZodiacSign] = Field(default=None, alias="northNode")
    south_node: Optional[ZodiacSign] = Field(default=None, alias="southNode")
    coordinates: Coordinates
    location_matched: bool = Field(..., alias="locationMatched")
    matched_city: Optional[str] = Field(default=None, alias="matchedCity")

    def to_wire(self) -> Dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
