import logging
from datetime import date, time
from typing import Optional, Union

from birthchart.domain.chart.calculator import EphemerisProvider
from birthchart.domain.chart.errors import UnresolvedPlacementError
from birthchart.domain.chart.parsing import parse_birth_time
from birthchart.domain.chart.schemas import (
    CHART_CONFIG,
    Coordinates,
    Origin,
    PlacementSet,
    RawPlacements,
)
from birthchart.domain.zodiac.signs import normalize_sign_label, opposite_sign

logger = logging.getLogger(__name__)


OPTIONAL_BODIES = ("mercury", "venus", "mars", "jupiter", "saturn")


class ChartComputer:
    """
    Drives the ephemeris provider and normalizes its output.

    Provider failures are not caught here; callers decide how to degrade.
    """

    def __init__(self, provider: EphemerisProvider):
        self.provider = provider

    def compute(
        self,
        birth_date: date,
        birth_time: Optional[Union[str, time]],
        coordinates: Coordinates,
    ) -> PlacementSet:
        parsed_time = parse_birth_time(birth_time)

        origin = Origin(
            year=birth_date.year,
            month=birth_date.month,
            day=birth_date.day,
            hour=parsed_time.hour,
            minute=parsed_time.minute,
            latitude=coordinates.lat,
            longitude=coordinates.lng,
        )

        raw = self.provider.compute_positions(origin, CHART_CONFIG)
        placements = self._normalize(raw)
        logger.debug(f"Resolved placements for {origin}: {placements}")
        return placements

    # ─────────────────────────────────────────────
    # Normalization
    # ─────────────────────────────────────────────

    def _normalize(self, raw: RawPlacements) -> PlacementSet:
        sun = normalize_sign_label(raw.get("sun"))
        moon = normalize_sign_label(raw.get("moon"))
        rising = normalize_sign_label(raw.get("ascendant"))

        missing = [
            name for name, sign in (("sun", sun), ("moon", moon), ("rising", rising))
            if sign is None
        ]
        if missing:
            raise UnresolvedPlacementError(
                f"Provider returned no usable sign for: {', '.join(missing)}"
            )

        optional = {
            name: normalize_sign_label(raw.get(name))
            for name in OPTIONAL_BODIES
        }

        # The south node is always the exact opposite of the north node
        north_node = normalize_sign_label(raw.get("northnode"))
        south_node = opposite_sign(north_node) if north_node else None

        return PlacementSet(
            sun=sun,
            moon=moon,
            rising=rising,
            north_node=north_node,
            south_node=south_node,
            **optional,
        )
