"""Shared HTTP transport and failure classification for provider calls."""

import asyncio
from typing import Awaitable, Callable, TypeVar

import httpx
import structlog
from pydantic import ValidationError

from src.config import Settings, get_settings
from src.models.result import Err, NetworkError, Ok, Result

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def create_client(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the AsyncClient shared by the geocoding and forecast clients.

    Args:
        settings: Settings to read timeout and User-Agent from (defaults to env)
        transport: Optional transport override, used by tests

    Returns:
        Configured httpx.AsyncClient
    """
    settings = settings or get_settings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.weather_api_timeout),
        headers={
            "User-Agent": settings.http_user_agent,
            "Accept": "application/json",
        },
        transport=transport,
    )


def classify_exception(exc: Exception) -> NetworkError:
    """Map an exception raised during a provider call to a NetworkError kind."""
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        if 400 <= status < 500:
            return NetworkError.CLIENT_ERROR
        if 500 <= status < 600:
            return NetworkError.SERVER_ERROR
        return NetworkError.UNKNOWN_FAILURE
    if isinstance(exc, httpx.TransportError):
        # Connect/read failures, DNS resolution and timeouts
        return NetworkError.NO_CONNECTIVITY
    if isinstance(exc, (ValidationError, httpx.DecodingError)):
        return NetworkError.DESERIALIZATION_FAILURE
    return NetworkError.UNKNOWN_FAILURE


async def safe_api_call(
    api_call: Callable[[], Awaitable[T]],
    operation: str,
) -> Result[T]:
    """Run a provider call and wrap its outcome in a Result.

    Every exception is classified and logged here; nothing but cancellation
    escapes.

    Args:
        api_call: Zero-argument coroutine factory performing the request
        operation: Short name used in log events (e.g. 'geocoding')

    Returns:
        Ok with the call's value, or Err with the classified NetworkError
    """
    try:
        return Ok(await api_call())
    except asyncio.CancelledError:
        raise
    except Exception as e:
        kind = classify_exception(e)
        log_kwargs = {"error": str(e), "error_type": type(e).__name__, "kind": kind.value}
        if isinstance(e, httpx.HTTPStatusError):
            log_kwargs["status_code"] = e.response.status_code
        if kind is NetworkError.UNKNOWN_FAILURE:
            logger.exception(f"{operation}_request_failed", **log_kwargs)
        else:
            logger.error(f"{operation}_request_failed", **log_kwargs)
        return Err(kind)
