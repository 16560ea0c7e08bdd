import logging

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_weather_service
from app.core.errors import ApiError, internal_error
from app.models.common import ErrorResponse
from app.models.forecast import ForecastResponse
from app.services.weather_service import WeatherService

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get(
    "/forecast",
    response_model=ForecastResponse,
    response_model_exclude_unset=True,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def get_forecast(
    # taken as raw strings so bad input gets our 400 envelope, not a 422
    latitude: str | None = Query(None),
    longitude: str | None = Query(None),
    svc: WeatherService = Depends(get_weather_service),
):
    try:
        return await svc.get_forecast(latitude, longitude)
    except ApiError:
        raise
    except Exception as e:
        logger.exception("Error fetching forecast")
        raise internal_error(e)
