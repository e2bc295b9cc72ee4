"""Weather data models for the MET Norway locationforecast API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _Payload(BaseModel):
    """Base for provider payload fragments: immutable, tolerant of extra keys."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class InstantDetails(_Payload):
    """Measurements valid at the entry's timestamp."""

    air_temperature: Optional[float] = Field(None, description="Air temperature in Celsius")
    wind_speed: Optional[float] = Field(None, description="Wind speed in m/s")


class Instant(_Payload):
    details: InstantDetails


class ConditionSummary(_Payload):
    symbol_code: str = Field(..., description="Weather symbol (e.g. 'partlycloudy_day')")


class NextHour(_Payload):
    summary: Optional[ConditionSummary] = None


class TimeSeriesData(_Payload):
    instant: Instant
    next_1_hours: Optional[NextHour] = None


class TimeSeriesEntry(_Payload):
    """One timestamped forecast record."""

    time: str
    data: TimeSeriesData


class ForecastProperties(_Payload):
    timeseries: list[TimeSeriesEntry]


class ForecastPayload(_Payload):
    """Root of a ``compact`` forecast response."""

    properties: ForecastProperties


class CityWeather(BaseModel):
    """Flat weather summary for a city."""

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(0.0, description="Air temperature in Celsius")
    wind_speed: float = Field(0.0, description="Wind speed in m/s")
    summary: str = Field("unknown", description="Weather symbol code")
