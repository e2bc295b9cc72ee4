"""HTTP response models for the weather API."""

from typing import Optional

from pydantic import BaseModel

from src.models.weather import CityWeather


class WeatherLookupResponse(BaseModel):
    """Result of ``GET /weather``.

    Attributes:
        status: Outcome kind (e.g. 'success', 'coordinates_empty')
        weather: Flat weather summary, present only on success
        message: User-facing failure message, absent on success
        correlation_id: Request tracking ID
    """

    status: str
    weather: Optional[CityWeather] = None
    message: Optional[str] = None
    correlation_id: str


class ErrorResponse(BaseModel):
    """Error response for rejected requests.

    Attributes:
        error: What happened
        detail: Why, and what to change
        correlation_id: Request tracking ID
    """

    error: str
    detail: str
    correlation_id: str
