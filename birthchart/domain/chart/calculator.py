from datetime import datetime
from functools import lru_cache
from typing import Optional, Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
import logging

import swisseph as swe
from timezonefinder import TimezoneFinder

from birthchart.config import settings
from birthchart.domain.chart.errors import EphemerisComputationError
from birthchart.domain.chart.schemas import EphemerisConfig, Origin, RawPlacements
from birthchart.domain.zodiac.signs import ZODIAC_SIGNS

logger = logging.getLogger(__name__)


class EphemerisProvider(Protocol):
    """
    Anything that turns an origin into per-body sign labels.

    Expected keys: sun, moon, mercury, venus, mars, jupiter, saturn,
    northnode and ascendant. Missing keys or None values are allowed.
    """

    def compute_positions(self, origin: Origin, config: EphemerisConfig) -> RawPlacements:
        ...


HOUSE_SYSTEM_CODES = {
    "placidus": b"P",
}


@lru_cache(maxsize=1)
def _timezone_finder() -> TimezoneFinder:
    return TimezoneFinder()


class SwissEphemerisProvider:
    """
    Ephemeris provider backed by the Swiss Ephemeris.

    This class:
    - Interprets the origin as local time at its coordinates
    - Computes tropical longitudes for the bodies and the ascendant
    - Returns sign labels only (no degrees, houses or aspects)
    """

    BODIES = {
        "sun": swe.SUN,
        "moon": swe.MOON,
        "mercury": swe.MERCURY,
        "venus": swe.VENUS,
        "mars": swe.MARS,
        "jupiter": swe.JUPITER,
        "saturn": swe.SATURN,
        "northnode": swe.MEAN_NODE,
    }

    def __init__(self, ephemeris_path: Optional[str] = None):
        # Without data files pyswisseph falls back to the built-in Moshier model
        path = ephemeris_path or settings.EPHEMERIS_PATH
        if path:
            swe.set_ephe_path(path)

    # ─────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────

    def compute_positions(self, origin: Origin, config: EphemerisConfig) -> RawPlacements:
        if config.zodiac != "tropical":
            raise EphemerisComputationError(f"Unsupported zodiac: {config.zodiac}")

        house_code = HOUSE_SYSTEM_CODES.get(config.house_system)
        if house_code is None:
            raise EphemerisComputationError(f"Unsupported house system: {config.house_system}")

        try:
            julian_day = self._julian_day(self._to_utc_datetime(origin))

            placements: RawPlacements = {}
            for name, body in self.BODIES.items():
                result = swe.calc_ut(julian_day, body)
                placements[name] = self._sign_label(result[0][0])

            _cusps, ascmc = swe.houses(
                julian_day, origin.latitude, origin.longitude, house_code
            )
            placements["ascendant"] = self._sign_label(ascmc[0])
        except Exception as e:
            raise EphemerisComputationError(f"Swiss Ephemeris failed: {e}") from e

        return placements

    # ─────────────────────────────────────────────
    # Time & Astronomy Helpers
    # ─────────────────────────────────────────────

    def _to_utc_datetime(self, origin: Origin) -> datetime:
        """
        Convert the local birth moment into a naive UTC datetime.
        """
        local_dt = datetime(origin.year, origin.month, origin.day, origin.hour, origin.minute)
        tz_name = _timezone_finder().timezone_at(lng=origin.longitude, lat=origin.latitude)

        if not tz_name:
            logger.warning(
                f"No timezone at ({origin.latitude}, {origin.longitude}), treating birth time as UTC"
            )
            return local_dt

        try:
            local_tz = ZoneInfo(tz_name)
        except ZoneInfoNotFoundError:
            logger.warning(f"Timezone '{tz_name}' not available, treating birth time as UTC")
            return local_dt

        # swisseph expects naive numbers
        utc_dt = local_dt.replace(tzinfo=local_tz).astimezone(ZoneInfo("UTC"))
        return utc_dt.replace(tzinfo=None)

    def _julian_day(self, dt: datetime) -> float:
        hour_decimal = dt.hour + dt.minute / 60.0 + dt.second / 3600.0
        return swe.julday(dt.year, dt.month, dt.day, hour_decimal)

    @staticmethod
    def _sign_label(longitude: float) -> str:
        return ZODIAC_SIGNS[int((longitude % 360) // 30)].value
