"""Application configuration using Pydantic settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging
    log_level: str = "INFO"

    # Geocoding API (OpenStreetMap Nominatim)
    geocoding_api_base_url: str = "https://nominatim.openstreetmap.org"

    # Forecast API (MET Norway locationforecast)
    forecast_api_base_url: str = "https://api.met.no/weatherapi/locationforecast/2.0"

    # Shared HTTP transport
    weather_api_timeout: int = 10  # seconds per request
    # Both providers reject anonymous clients
    http_user_agent: str = "city-weather/0.1 (+https://github.com/city-weather)"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
