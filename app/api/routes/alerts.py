import logging

from fastapi import APIRouter, Depends

from app.api.deps import get_weather_service
from app.core.errors import ApiError, internal_error
from app.models.alerts import AlertsResponse
from app.models.common import ErrorResponse
from app.services.weather_service import WeatherService

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get(
    "/alerts/{state}",
    response_model=AlertsResponse,
    response_model_exclude_unset=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_alerts(
    state: str,
    svc: WeatherService = Depends(get_weather_service),
):
    try:
        return await svc.get_alerts(state)
    except ApiError:
        raise
    except Exception as e:
        logger.exception("Error fetching alerts")
        raise internal_error(e)
