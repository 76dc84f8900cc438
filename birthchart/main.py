import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from birthchart.api.v1.router import api_router
from birthchart.config import settings
from birthchart.domain.chart.errors import InvalidBirthDataError

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {
            "loc": list(error.get("loc", ())),
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": details},
    )


async def invalid_birth_data_handler(request: Request, exc: InvalidBirthDataError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": [{"msg": str(exc)}]},
    )


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(title="Birth Chart Engine")

    # 1. Enable CORS for the web and mobile clients
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 2. Input errors surface as 400, never as a degraded chart
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(InvalidBirthDataError, invalid_birth_data_handler)

    # 3. Include API Routes
    app.include_router(api_router, prefix=settings.API_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--host", type=str, default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    logger.info(f"Server starting on http://{args.host}:{args.port}{settings.API_PREFIX}")
    uvicorn.run("birthchart.main:app", host=args.host, port=args.port, reload=settings.DEBUG)
