"""Pytest configuration and fixtures."""

from typing import Callable

import httpx
import pytest

from src.models.location import LocationCandidate
from src.models.weather import ForecastPayload
from src.services.forecast_service import ForecastClient
from src.services.geocoding_service import GeocodingClient
from src.services.weather_service import WeatherService

GEOCODING_BASE_URL = "https://nominatim.test"
FORECAST_BASE_URL = "https://forecast.test/locationforecast/2.0"

BERLIN_GEOCODING = [
    {
        "place_id": 123456,
        "licence": "test",
        "osm_type": "relation",
        "osm_id": 654321,
        "lat": "52.5200",
        "lon": "13.4050",
        "category": "place",
        "type": "city",
        "place_rank": 16,
        "importance": 0.75,
        "addresstype": "city",
        "name": "Berlin",
        "display_name": "Berlin, Germany",
        "boundingbox": ["52.3382", "52.6755", "13.0883", "13.7611"],
    }
]

BERLIN_FORECAST = {
    "type": "Feature",
    "properties": {
        "meta": {"updated_at": "2023-11-09T11:00:00Z"},
        "timeseries": [
            {
                "time": "2023-11-09T12:00:00Z",
                "data": {
                    "instant": {
                        "details": {"air_temperature": 15.5, "wind_speed": 3.2}
                    },
                    "next_1_hours": {"summary": {"symbol_code": "partlycloudy_day"}},
                },
            },
            {
                "time": "2023-11-09T13:00:00Z",
                "data": {
                    "instant": {
                        "details": {"air_temperature": 16.0, "wind_speed": 4.0}
                    },
                    "next_1_hours": {"summary": {"symbol_code": "rain"}},
                },
            },
        ],
    },
}

SPARSE_FORECAST = {
    "properties": {
        "timeseries": [
            {
                "time": "2023-11-09T12:00:00Z",
                "data": {"instant": {"details": {}}},
            }
        ]
    }
}

EMPTY_FORECAST = {"properties": {"timeseries": []}}

Handler = Callable[[httpx.Request], httpx.Response]


def route_by_host(geocoding: Handler, forecast: Handler) -> Handler:
    """Dispatch mocked requests to a per-provider handler."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "nominatim.test":
            return geocoding(request)
        if request.url.host == "forecast.test":
            return forecast(request)
        raise AssertionError(f"Unexpected request: {request.url}")

    return handler


def build_service(handler: Handler) -> WeatherService:
    """Create a WeatherService whose HTTP traffic goes to ``handler``."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return WeatherService(
        geocoding_client=GeocodingClient(client, base_url=GEOCODING_BASE_URL),
        forecast_client=ForecastClient(client, base_url=FORECAST_BASE_URL),
    )


@pytest.fixture
def berlin_candidate() -> LocationCandidate:
    return LocationCandidate.model_validate(BERLIN_GEOCODING[0])


@pytest.fixture
def berlin_forecast() -> ForecastPayload:
    return ForecastPayload.model_validate(BERLIN_FORECAST)


@pytest.fixture
def sparse_forecast() -> ForecastPayload:
    return ForecastPayload.model_validate(SPARSE_FORECAST)
