"""HTTP surface: weather routes and request middleware."""

from src.api.middleware import CorrelationIdMiddleware
from src.api.routes import get_weather_service, router

__all__ = ["CorrelationIdMiddleware", "get_weather_service", "router"]
