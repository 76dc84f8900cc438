from functools import lru_cache

from birthchart.services.chart_service import BirthChartService
from birthchart.services.location_service import LocationService
from birthchart.services.synastry_service import SynastryService


@lru_cache(maxsize=1)
def get_chart_service() -> BirthChartService:
    """
    Shared chart service.

    Everything it holds is read-only, so one instance serves all requests.
    """
    return BirthChartService()


def get_location_service() -> LocationService:
    return LocationService()


def get_synastry_service() -> SynastryService:
    return SynastryService()
