"""User-facing text for weather lookup outcomes."""

from src.models.outcome import (
    ClientError,
    CoordinatesEmpty,
    DeserializationError,
    NoInternetConnection,
    NoWeatherData,
    ServerError,
    Success,
    UnknownError,
    WeatherOutcome,
)

_FAILURE_MESSAGES = {
    CoordinatesEmpty: "No coordinates found for the entered city.",
    NoWeatherData: "No weather data found!",
    ClientError: "Client error! Please try again!",
    ServerError: "Server error! Please try again!",
    NoInternetConnection: "No internet connection!",
    DeserializationError: "Failed to deserialize data!",
    UnknownError: "Something unexpected happened! Please try again!",
}


def get_error_message(outcome: WeatherOutcome) -> str | None:
    """Get the message shown for a failed lookup.

    Returns None for Success. Raises TypeError for anything that is not a
    known outcome variant.
    """
    if isinstance(outcome, Success):
        return None
    message = _FAILURE_MESSAGES.get(type(outcome))
    if message is None:
        raise TypeError(f"Unhandled weather outcome: {outcome!r}")
    return message


def format_outcome(outcome: WeatherOutcome) -> str:
    """Format an outcome as readable text."""
    if isinstance(outcome, Success):
        weather = outcome.weather
        lines = [
            f"Temperature: {weather.temperature}°C",
            f"Wind: {weather.wind_speed} m/s",
            f"Conditions: {weather.summary}",
        ]
        return "\n".join(lines)
    return get_error_message(outcome)
