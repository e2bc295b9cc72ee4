"""Weather lookup for a city: geocode, fetch forecast, reduce to one outcome."""

import time
from typing import Optional

import structlog

from src.models.outcome import (
    ClientError,
    CoordinatesEmpty,
    DeserializationError,
    InvalidCityInput,
    NoInternetConnection,
    NoWeatherData,
    ServerError,
    Success,
    UnknownError,
    WeatherOutcome,
)
from src.models.result import Err, NetworkError
from src.models.weather import CityWeather, ForecastPayload
from src.services.forecast_service import ForecastClient
from src.services.geocoding_service import GeocodingClient
from src.services.http_client import create_client

logger = structlog.get_logger(__name__)

UNKNOWN_SUMMARY = "unknown"

_OUTCOME_BY_ERROR = {
    NetworkError.NO_CONNECTIVITY: NoInternetConnection,
    NetworkError.CLIENT_ERROR: ClientError,
    NetworkError.SERVER_ERROR: ServerError,
    NetworkError.DESERIALIZATION_FAILURE: DeserializationError,
    NetworkError.UNKNOWN_FAILURE: UnknownError,
}


def validate_city_name(raw: str) -> Optional[str]:
    """Clean a raw city input.

    Only trailing whitespace is stripped. The result must be non-empty and
    made of letters and whitespace only.

    Returns:
        The cleaned name, or None if the input is invalid
    """
    cleaned = raw.rstrip()
    if not cleaned:
        return None
    if not all(ch.isalpha() or ch.isspace() for ch in cleaned):
        return None
    return cleaned


def map_network_error(error: NetworkError) -> WeatherOutcome:
    """Map a transport failure kind to its outcome, whichever call produced it."""
    outcome_cls = _OUTCOME_BY_ERROR.get(error)
    if outcome_cls is None:
        raise TypeError(f"Unhandled network error kind: {error!r}")
    return outcome_cls()


def reduce_forecast(payload: ForecastPayload) -> CityWeather:
    """Flatten the first time-series entry of a non-empty forecast."""
    entry = payload.properties.timeseries[0]
    details = entry.data.instant.details
    next_hour = entry.data.next_1_hours

    temperature = details.air_temperature
    wind_speed = details.wind_speed
    summary = UNKNOWN_SUMMARY
    if next_hour is not None and next_hour.summary is not None:
        summary = next_hour.summary.symbol_code

    # Absent readings are reported as 0.0, same as a measured zero
    return CityWeather(
        temperature=temperature if temperature is not None else 0.0,
        wind_speed=wind_speed if wind_speed is not None else 0.0,
        summary=summary,
    )


class WeatherService:
    """Resolves a city name to its current weather.

    Holds no per-lookup state, so one instance may serve concurrent
    lookups. Collaborators are injectable; when either is missing, both
    missing clients share one HTTP client owned by the service.
    """

    def __init__(
        self,
        geocoding_client: GeocodingClient | None = None,
        forecast_client: ForecastClient | None = None,
    ):
        self._http_client = None
        if geocoding_client is None or forecast_client is None:
            self._http_client = create_client()
        if geocoding_client is None:
            geocoding_client = GeocodingClient(self._http_client)
        if forecast_client is None:
            forecast_client = ForecastClient(self._http_client)
        self.geocoding_client = geocoding_client
        self.forecast_client = forecast_client

    async def close(self):
        """Close the owned HTTP client, if any."""
        if self._http_client is not None and not self._http_client.is_closed:
            await self._http_client.aclose()
            self._http_client = None

    async def get_weather_by_city(self, city: str) -> WeatherOutcome:
        """Run the geocode -> forecast -> reduce pipeline for a clean city name.

        No retries. Any failed call ends the lookup with the mapped outcome.
        Cancellation propagates.
        """
        geocoding = await self.geocoding_client.search(city)
        if isinstance(geocoding, Err):
            return map_network_error(geocoding.error)

        if not geocoding.data:
            return CoordinatesEmpty()
        candidate = geocoding.data[0]

        forecast = await self.forecast_client.fetch(candidate.lat, candidate.lon)
        if isinstance(forecast, Err):
            return map_network_error(forecast.error)

        payload = forecast.data
        if payload is None or not payload.properties.timeseries:
            return NoWeatherData()

        return Success(weather=reduce_forecast(payload))

    async def resolve(self, raw_city: str) -> InvalidCityInput | WeatherOutcome:
        """Validate raw input, then look up the weather.

        Args:
            raw_city: City name exactly as entered by the user

        Returns:
            InvalidCityInput if validation fails (no network access made),
            otherwise one WeatherOutcome
        """
        city = validate_city_name(raw_city)
        if city is None:
            logger.info("weather_lookup_invalid_input", raw_input=raw_city)
            return InvalidCityInput(raw_input=raw_city)

        start_time = time.perf_counter()
        outcome = await self.get_weather_by_city(city)
        latency_ms = int((time.perf_counter() - start_time) * 1000)

        logger.info(
            "weather_lookup_completed",
            city=city,
            outcome=outcome.kind,
            latency_ms=latency_ms,
        )
        return outcome


async def resolve_weather_for_city(raw_city: str) -> InvalidCityInput | WeatherOutcome:
    """One-shot lookup with a service that is closed afterwards."""
    service = WeatherService()
    try:
        return await service.resolve(raw_city)
    finally:
        await service.close()
