"""Outcome of a city -> weather lookup.

``WeatherOutcome`` is a closed union discriminated on ``kind``. Only
``Success`` carries weather data. ``InvalidCityInput`` is deliberately kept
out of the union: it is produced before any network access and never
describes a lookup that actually ran.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from src.models.weather import CityWeather


class _Outcome(BaseModel):
    model_config = ConfigDict(frozen=True)


class Success(_Outcome):
    kind: Literal["success"] = "success"
    weather: CityWeather


class CoordinatesEmpty(_Outcome):
    """Geocoding found no candidate for the city."""

    kind: Literal["coordinates_empty"] = "coordinates_empty"


class NoWeatherData(_Outcome):
    """Forecast was absent (204) or had an empty time series."""

    kind: Literal["no_weather_data"] = "no_weather_data"


class ClientError(_Outcome):
    kind: Literal["client_error"] = "client_error"


class ServerError(_Outcome):
    kind: Literal["server_error"] = "server_error"


class NoInternetConnection(_Outcome):
    kind: Literal["no_internet_connection"] = "no_internet_connection"


class DeserializationError(_Outcome):
    kind: Literal["deserialization_error"] = "deserialization_error"


class UnknownError(_Outcome):
    kind: Literal["unknown_error"] = "unknown_error"


WeatherOutcome = Annotated[
    Union[
        Success,
        CoordinatesEmpty,
        NoWeatherData,
        ClientError,
        ServerError,
        NoInternetConnection,
        DeserializationError,
        UnknownError,
    ],
    Field(discriminator="kind"),
]


class InvalidCityInput(BaseModel):
    """City input rejected before any network call."""

    model_config = ConfigDict(frozen=True)

    raw_input: str
    reason: str = "City name must be non-empty and contain only letters and spaces."
