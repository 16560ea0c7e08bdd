"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_nws_client
from app.clients.nws import NWSClient
from app.main import app

NWS_BASE = "https://test-nws.example.com"
FORECAST_URL = f"{NWS_BASE}/gridpoints/TOP/31,80/forecast"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def nws() -> NWSClient:
    return NWSClient(base_url=NWS_BASE)


@pytest.fixture
def client(nws: NWSClient):
    """TestClient wired to a NWS client pointed at the mocked base URL."""
    app.dependency_overrides[get_nws_client] = lambda: nws
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def alerts_payload() -> dict:
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "id": "urn:oid:1",
                "properties": {
                    "event": "Red Flag Warning",
                    "areaDesc": "Santa Lucia Mountains",
                    "severity": "Severe",
                    "status": "Actual",
                    "headline": "Red Flag Warning issued October 19",
                    "certainty": "Likely",
                },
            },
            {
                "id": "urn:oid:2",
                "properties": {
                    "event": "Wind Advisory",
                    "areaDesc": "Mojave Desert",
                    "severity": "Moderate",
                    "status": "Actual",
                },
            },
        ],
    }


@pytest.fixture
def points_payload() -> dict:
    return {
        "properties": {
            "gridId": "TOP",
            "gridX": 31,
            "gridY": 80,
            "forecast": FORECAST_URL,
        }
    }


@pytest.fixture
def forecast_payload() -> dict:
    return {
        "properties": {
            "periods": [
                {
                    "number": 1,
                    "name": "Tonight",
                    "temperature": 48,
                    "temperatureUnit": "F",
                    "windSpeed": "5 to 10 mph",
                    "windDirection": "S",
                    "shortForecast": "Mostly Clear",
                },
                {
                    "number": 2,
                    "name": "Monday",
                    "temperature": 0,
                    "temperatureUnit": "F",
                    "windSpeed": "10 mph",
                    "shortForecast": "Sunny",
                },
            ]
        }
    }
