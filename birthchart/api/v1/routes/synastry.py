from typing import Any, Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from birthchart.api.dependencies import get_synastry_service
from birthchart.domain.chart.schemas import BirthChartResult
from birthchart.services.synastry_service import SynastryService


router = APIRouter()


class SynastryRequest(BaseModel):
    """Two charts, each as returned by /birth-chart."""
    yours: BirthChartResult
    theirs: BirthChartResult


@router.post(
    "/synastry",
    summary="Compare the elements of two birth charts",
)
async def compare_charts(
    payload: SynastryRequest,
    service: SynastryService = Depends(get_synastry_service),
) -> Dict[str, Any]:
    return service.compare(payload.yours, payload.theirs)
