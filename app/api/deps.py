from fastapi import Depends

from app.core.config import settings
from app.clients.nws import NWSClient
from app.services.weather_service import WeatherService


def get_nws_client() -> NWSClient:
    return NWSClient(
        base_url=settings.nws_base_url,
        user_agent=settings.nws_user_agent,
        accept=settings.nws_accept,
        timeout_seconds=settings.http_timeout_seconds,
    )

def get_weather_service(
    nws: NWSClient = Depends(get_nws_client),
) -> WeatherService:
    return WeatherService(client=nws)
