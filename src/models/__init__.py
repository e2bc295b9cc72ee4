"""Models package exports."""

from src.models.location import LocationCandidate
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
from src.models.result import Err, NetworkError, Ok, Result
from src.models.weather import CityWeather, ForecastPayload, TimeSeriesEntry

__all__ = [
    "CityWeather",
    "ClientError",
    "CoordinatesEmpty",
    "DeserializationError",
    "Err",
    "ForecastPayload",
    "InvalidCityInput",
    "LocationCandidate",
    "NetworkError",
    "NoInternetConnection",
    "NoWeatherData",
    "Ok",
    "Result",
    "ServerError",
    "Success",
    "TimeSeriesEntry",
    "UnknownError",
    "WeatherOutcome",
]
