from typing import Any, Dict

from app.models.alerts import AlertFeature, AlertRecord
from app.models.forecast import ForecastPeriod, RawForecastPeriod


def format_alert(feature: AlertFeature) -> AlertRecord:
    props = feature.properties
    return AlertRecord(
        event=props.event or "Unknown",
        area=props.areaDesc or "Unknown",
        severity=props.severity or "Unknown",
        status=props.status or "Unknown",
        headline=props.headline or "No headline",
    )


def format_period(period: RawForecastPeriod) -> ForecastPeriod:
    """Fill defaults for every field except temperature, which is passed through."""
    fields: Dict[str, Any] = {
        "name": period.name or "Unknown",
        "temperatureUnit": period.temperatureUnit or "F",
        "windSpeed": period.windSpeed or "Unknown",
        "windDirection": period.windDirection or "",
        "shortForecast": period.shortForecast or "No forecast available",
    }
    if "temperature" in period.model_fields_set:
        fields["temperature"] = period.temperature
    return ForecastPeriod(**fields)
