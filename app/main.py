import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.errors import ApiError, api_error_handler, http_error_handler
from app.core.logging import configure_logging
from app.models.common import HealthResponse
from app.api.routes.alerts import router as alerts_router
from app.api.routes.forecast import router as forecast_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    base = f"http://localhost:{settings.port}"
    logger.info("Weather API Server running on port %s", settings.port)
    logger.info("Health check: %s/health", base)
    logger.info("Alerts: %s/api/alerts/:state", base)
    logger.info("Forecast: %s/api/forecast?latitude=X&longitude=Y", base)
    yield


def create_app() -> FastAPI:
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(status="ok", service=settings.app_name)

    app.include_router(alerts_router, prefix="/api", tags=["alerts"])
    app.include_router(forecast_router, prefix="/api", tags=["forecast"])

    return app

app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
