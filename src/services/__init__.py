"""Services package exports."""

from src.services.forecast_service import ForecastClient
from src.services.geocoding_service import GeocodingClient
from src.services.logging_service import configure_logging, get_logger
from src.services.weather_service import WeatherService, resolve_weather_for_city
from src.services.weather_state import WeatherState, WeatherStateHolder, WeatherStatus

__all__ = [
    "ForecastClient",
    "GeocodingClient",
    "WeatherService",
    "WeatherState",
    "WeatherStateHolder",
    "WeatherStatus",
    "configure_logging",
    "get_logger",
    "resolve_weather_for_city",
]
