"""API route definitions for weather and health endpoints."""

from datetime import datetime, timezone
from uuid import uuid4

import structlog
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from src.models.outcome import InvalidCityInput, Success
from src.models.response import ErrorResponse, WeatherLookupResponse
from src.services.weather_messages import get_error_message
from src.services.weather_service import WeatherService

router = APIRouter()


def get_weather_service(request: Request) -> WeatherService:
    """Get the application's weather service."""
    return request.app.state.weather_service


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint.

    Returns:
        Status and timestamp in ISO8601 format
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get(
    "/weather",
    response_model=WeatherLookupResponse,
    responses={422: {"model": ErrorResponse}},
)
async def get_weather(
    request: Request,
    city: str = Query(..., description="City name, letters and spaces only"),
    service: WeatherService = Depends(get_weather_service),
):
    """Current weather for a city.

    Invalid input is rejected with 422 before any provider is contacted.
    Every lookup that ran answers 200; failures are reported in ``status``
    and ``message``.
    """
    correlation_id = getattr(request.state, "correlation_id", None) or str(uuid4())
    logger = structlog.get_logger()

    result = await service.resolve(city)

    if isinstance(result, InvalidCityInput):
        logger.warning("weather_request_rejected", correlation_id=correlation_id)
        error = ErrorResponse(
            error="Validation error",
            detail=result.reason,
            correlation_id=correlation_id,
        )
        return JSONResponse(
            status_code=422,
            content=error.model_dump(),
            headers={"X-Correlation-Id": correlation_id},
        )

    return WeatherLookupResponse(
        status=result.kind,
        weather=result.weather if isinstance(result, Success) else None,
        message=get_error_message(result),
        correlation_id=correlation_id,
    )
