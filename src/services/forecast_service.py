"""Forecast client for the MET Norway locationforecast API."""

from typing import Optional

import httpx
import structlog

from src.config import get_settings
from src.models.result import Result
from src.models.weather import ForecastPayload
from src.services.http_client import safe_api_call

logger = structlog.get_logger(__name__)


class ForecastClient:
    """Fetches the compact forecast for a coordinate pair."""

    def __init__(self, client: httpx.AsyncClient, base_url: str | None = None):
        self._client = client
        self._base_url = (base_url or get_settings().forecast_api_base_url).rstrip("/")

    async def _fetch(self, lat: str, lon: str) -> Optional[ForecastPayload]:
        response = await self._client.get(
            f"{self._base_url}/compact",
            params={"lat": lat, "lon": lon},
        )
        response.raise_for_status()
        if response.status_code == httpx.codes.NO_CONTENT:
            logger.info("forecast_no_content", lat=lat, lon=lon)
            return None
        return ForecastPayload.model_validate_json(response.content)

    async def fetch(self, lat: str, lon: str) -> Result[Optional[ForecastPayload]]:
        """Fetch the forecast for a coordinate pair.

        Args:
            lat: Latitude string exactly as returned by geocoding
            lon: Longitude string exactly as returned by geocoding

        Returns:
            Ok with the payload, Ok(None) on 204 No Content,
            or Err with the classified NetworkError
        """
        return await safe_api_call(lambda: self._fetch(lat, lon), "forecast")
