from datetime import date
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field, field_validator

from birthchart.api.dependencies import get_chart_service
from birthchart.domain.chart.parsing import parse_birth_date, parse_birth_time
from birthchart.domain.chart.errors import InvalidBirthDataError
from birthchart.domain.chart.schemas import BirthInput
from birthchart.domain.zodiac.classifier import sun_sign_for_date
from birthchart.domain.zodiac.signs import element_of
from birthchart.services.chart_service import BirthChartService


router = APIRouter()


# ─────────────────────────────────────────────
# Request Schema
# ─────────────────────────────────────────────

class BirthChartRequest(BaseModel):
    dateOfBirth: str = Field(..., examples=["1995-06-15"])
    timeOfBirth: Optional[str] = Field(default="12:00", examples=["14:30"])
    cityOfBirth: str = Field(..., examples=["Los Angeles"])

    @field_validator("dateOfBirth")
    @classmethod
    def check_date(cls, value: str) -> str:
        try:
            parse_birth_date(value)
        except InvalidBirthDataError as e:
            raise ValueError(str(e)) from e
        return value

    @field_validator("timeOfBirth")
    @classmethod
    def check_time(cls, value: Optional[str]) -> Optional[str]:
        try:
            parse_birth_time(value)
        except InvalidBirthDataError as e:
            raise ValueError(str(e)) from e
        return value

    def to_birth_input(self) -> BirthInput:
        return BirthInput(
            date_of_birth=parse_birth_date(self.dateOfBirth),
            time_of_birth=parse_birth_time(self.timeOfBirth),
            city_of_birth=self.cityOfBirth,
        )


# ─────────────────────────────────────────────
# Routes
# ─────────────────────────────────────────────

@router.post(
    "/birth-chart",
    summary="Resolve birth details into zodiac placements",
)
async def create_birth_chart(
    payload: BirthChartRequest,
    service: BirthChartService = Depends(get_chart_service),
) -> Dict[str, Any]:
    """
    Always returns a chart. When the ephemeris fails, sun, moon and
    rising all carry the calendar sun sign.
    """
    chart = service.safe_compute(payload.to_birth_input())
    return chart.to_wire()


@router.get(
    "/sun-sign",
    summary="Sun sign for a calendar date",
)
async def get_sun_sign(
    date_of_birth: date = Query(..., alias="date", description="Birth date, YYYY-MM-DD"),
) -> Dict[str, Any]:
    sign = sun_sign_for_date(date_of_birth)
    return {
        "date": date_of_birth.isoformat(),
        "sign": sign.value,
        "element": element_of(sign).value,
    }
