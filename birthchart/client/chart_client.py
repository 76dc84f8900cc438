import logging
from datetime import date, datetime
from typing import Optional, Union

import httpx
from pydantic import ValidationError

from birthchart.config import settings
from birthchart.domain.chart.errors import RemoteChartError
from birthchart.domain.chart.parsing import parse_birth_date, parse_birth_time
from birthchart.domain.chart.schemas import BirthChartResult, Coordinates
from birthchart.domain.location.gazetteer import GazetteerResolver, default_resolver
from birthchart.domain.zodiac.classifier import sun_sign_for_date

logger = logging.getLogger(__name__)


class ChartClient:
    """
    Client for the birth chart API with a local approximation fallback.

    Malformed birth input is rejected up front with InvalidBirthDataError
    and is never approximated.

    When the API is unreachable, times out, or answers with a non-2xx
    status, the chart is approximated from the calendar date alone:
    moon and rising are set to the sun sign because they cannot be
    derived without an ephemeris.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        resolver: GazetteerResolver = default_resolver,
    ):
        self.base_url = (base_url or settings.CHART_API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.CHART_API_TIMEOUT
        self.transport = transport
        self.resolver = resolver

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{settings.API_PREFIX}/birth-chart"

    async def resolve_remote(
        self,
        date_of_birth: Union[str, date],
        time_of_birth: Optional[str] = None,
        city_of_birth: str = "",
    ) -> BirthChartResult:
        try:
            return await self.fetch(date_of_birth, time_of_birth, city_of_birth)
        except RemoteChartError as e:
            logger.warning(f"Birth chart API unavailable ({e}), using sun sign approximation")
            return self.approximate(date_of_birth, city_of_birth)

    async def fetch(
        self,
        date_of_birth: Union[str, date],
        time_of_birth: Optional[str] = None,
        city_of_birth: str = "",
    ) -> BirthChartResult:
        """
        Raises InvalidBirthDataError before any request for malformed input,
        RemoteChartError for transport, status or payload failures.
        """
        birth_date = parse_birth_date(date_of_birth)
        if isinstance(birth_date, datetime):
            birth_date = birth_date.date()
        parse_birth_time(time_of_birth)

        payload = {
            "dateOfBirth": birth_date.isoformat(),
            "timeOfBirth": time_of_birth or "12:00",
            "cityOfBirth": city_of_birth,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self.endpoint, json=payload)
                response.raise_for_status()
                return BirthChartResult.model_validate(response.json())
        except httpx.HTTPError as e:
            raise RemoteChartError(str(e) or type(e).__name__) from e
        except (ValueError, ValidationError) as e:
            raise RemoteChartError(f"Malformed chart response: {e}") from e

    def approximate(self, date_of_birth: Union[str, date], city_of_birth: str = "") -> BirthChartResult:
        sun = sun_sign_for_date(date_of_birth)
        location = self.resolver.resolve(city_of_birth)
        return BirthChartResult(
            sun=sun,
            moon=sun,
            rising=sun,
            coordinates=Coordinates(lat=location.lat, lng=location.lng),
            location_matched=location.matched,
            matched_city=location.matched_city_name,
        )
