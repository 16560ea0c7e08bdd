from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import Optional, Tuple

from app.clients.nws import NWSClient
from app.core.errors import ApiError
from app.models.alerts import AlertsPayload, AlertsResponse
from app.models.forecast import ForecastPayload, ForecastResponse, PointsPayload
from app.services.formatters import format_alert, format_period

logger = logging.getLogger(__name__)

LAT_RANGE = (-90.0, 90.0)
LON_RANGE = (-180.0, 180.0)

# plain ASCII decimals with optional exponent, or a signed "Infinity"
_NUMBER_RE = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


def normalize_state(raw: str) -> str:
    state = (raw or "").upper()
    if len(state) != 2:
        raise ApiError(400, "State code must be 2 letters (e.g., CA, NY)")
    return state


def _to_float(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    text = raw.strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    return float(text)


def parse_coordinate(lat_raw: Optional[str], lon_raw: Optional[str]) -> Tuple[float, float]:
    """
    Parse and range-check a latitude/longitude pair.

    Unparseable input (missing, blank, non-numeric, "nan", "inf") is rejected
    before either axis is range-checked; "Infinity" parses and then fails the
    range check. Latitude is checked before longitude.
    """
    latitude = _to_float(lat_raw)
    longitude = _to_float(lon_raw)
    if latitude is None or longitude is None:
        raise ApiError(400, "Valid latitude and longitude are required")

    if not LAT_RANGE[0] <= latitude <= LAT_RANGE[1]:
        raise ApiError(400, "Latitude must be between -90 and 90")
    if not LON_RANGE[0] <= longitude <= LON_RANGE[1]:
        raise ApiError(400, "Longitude must be between -180 and 180")

    return latitude, longitude


def _fmt_coord(value: float) -> str:
    # 39.0 -> "39", 39.5 -> "39.5", 1e-05 -> "0.00001"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


class WeatherService:
    def __init__(self, client: NWSClient):
        self.client = client

    async def get_alerts(self, raw_state: str) -> AlertsResponse:
        state = normalize_state(raw_state)

        data = await self.client.fetch_json(self.client.alerts_url(state))
        if data is None:
            raise ApiError(500, "Failed to retrieve alerts data")

        features = AlertsPayload.model_validate(data).features or []
        if not features:
            return AlertsResponse(
                state=state,
                alerts=[],
                message=f"No active alerts for {state}",
            )

        return AlertsResponse(
            state=state,
            alertCount=len(features),
            alerts=[format_alert(f) for f in features],
        )

    async def get_forecast(self, lat_raw: Optional[str], lon_raw: Optional[str]) -> ForecastResponse:
        latitude, longitude = parse_coordinate(lat_raw, lon_raw)

        # 1) grid point; absence most often means a location outside NWS coverage
        points = await self.client.fetch_json(self.client.points_url(latitude, longitude))
        if points is None:
            raise ApiError(
                404,
                f"Failed to retrieve grid point data for coordinates: "
                f"{_fmt_coord(latitude)}, {_fmt_coord(longitude)}. "
                f"This location may not be supported by the NWS API "
                f"(only US locations are supported).",
            )

        point_props = PointsPayload.model_validate(points).properties
        forecast_url = point_props.forecast if point_props else None
        if not forecast_url:
            raise ApiError(500, "Failed to get forecast URL from grid point data")

        # 2) forecast for that grid point
        forecast = await self.client.fetch_json(forecast_url)
        if forecast is None:
            raise ApiError(500, "Failed to retrieve forecast data")

        forecast_props = ForecastPayload.model_validate(forecast).properties
        periods = (forecast_props.periods if forecast_props else None) or []
        if not periods:
            logger.info("No forecast periods for %s, %s", latitude, longitude)
            return ForecastResponse(
                latitude=latitude,
                longitude=longitude,
                periods=[],
                message="No forecast periods available",
            )

        return ForecastResponse(
            latitude=latitude,
            longitude=longitude,
            periods=[format_period(p) for p in periods],
        )
