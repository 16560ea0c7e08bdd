from pydantic import BaseModel, ConfigDict
from typing import List, Optional, Union


# --- upstream (api.weather.gov /points and /gridpoints/.../forecast) ---

class PointProperties(BaseModel):
    model_config = ConfigDict(extra="ignore")

    forecast: Optional[str] = None


class PointsPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    properties: Optional[PointProperties] = None


class RawForecastPeriod(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    temperature: Optional[Union[int, float]] = None
    temperatureUnit: Optional[str] = None
    windSpeed: Optional[str] = None
    windDirection: Optional[str] = None
    shortForecast: Optional[str] = None


class ForecastProperties(BaseModel):
    model_config = ConfigDict(extra="ignore")

    periods: Optional[List[RawForecastPeriod]] = None


class ForecastPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    properties: Optional[ForecastProperties] = None


# --- ours ---

class ForecastPeriod(BaseModel):
    name: str
    # passed through as-is; left unset when upstream omits it
    temperature: Optional[Union[int, float]] = None
    temperatureUnit: str
    windSpeed: str
    windDirection: str
    shortForecast: str


class ForecastResponse(BaseModel):
    latitude: float
    longitude: float
    periods: List[ForecastPeriod]
    message: Optional[str] = None
