import logging
from typing import Optional

from birthchart.domain.chart.calculator import EphemerisProvider, SwissEphemerisProvider
from birthchart.domain.chart.engine import ChartComputer
from birthchart.domain.chart.schemas import BirthChartResult, BirthInput, Coordinates
from birthchart.domain.location.gazetteer import GazetteerResolver, default_resolver
from birthchart.domain.zodiac.classifier import ZodiacClassifier, default_classifier

logger = logging.getLogger(__name__)


class BirthChartService:
    """
    Resolves birth details into a chart and never fails the caller.

    Geocoding always runs first. If the ephemeris computation raises for
    any reason, the sun sign from the date table stands in for sun, moon
    and rising, and the optional placements are left out.
    """

    def __init__(
        self,
        provider: Optional[EphemerisProvider] = None,
        resolver: GazetteerResolver = default_resolver,
        classifier: ZodiacClassifier = default_classifier,
    ):
        self.computer = ChartComputer(provider or SwissEphemerisProvider())
        self.resolver = resolver
        self.classifier = classifier

    def safe_compute(self, birth: BirthInput) -> BirthChartResult:
        location = self.resolver.resolve(birth.city_of_birth)
        coordinates = Coordinates(lat=location.lat, lng=location.lng)

        try:
            placements = self.computer.compute(
                birth.date_of_birth,
                birth.time_of_birth,
                coordinates,
            )
        except Exception:
            logger.exception(
                f"Ephemeris computation failed for {birth.date_of_birth}, "
                f"falling back to sun sign only"
            )
            sun = self.classifier.classify_date(birth.date_of_birth)
            return BirthChartResult(
                sun=sun,
                moon=sun,
                rising=sun,
                coordinates=coordinates,
                location_matched=location.matched,
                matched_city=location.matched_city_name,
            )

        return BirthChartResult(
            **placements.model_dump(),
            coordinates=coordinates,
            location_matched=location.matched,
            matched_city=location.matched_city_name,
        )
