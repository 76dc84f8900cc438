from fastapi import APIRouter

from birthchart.api.v1.routes.health import router as health_router
from birthchart.api.v1.routes.birth_chart import router as birth_chart_router
from birthchart.api.v1.routes.location import router as location_router
from birthchart.api.v1.routes.synastry import router as synastry_router

api_router = APIRouter()

# ─────────────────────────────────────────────
# Public Routes
# ─────────────────────────────────────────────

api_router.include_router(
    health_router,
    tags=["Health"],
)

api_router.include_router(
    birth_chart_router,
    tags=["Birth Chart"],
)

api_router.include_router(
    location_router,
    tags=["Locations"],
)

api_router.include_router(
    synastry_router,
    tags=["Synastry"],
)
