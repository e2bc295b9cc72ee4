"""Geocoding client for the OpenStreetMap Nominatim API."""

from typing import Optional

import httpx
import structlog
from pydantic import TypeAdapter

from src.config import get_settings
from src.models.location import LocationCandidate
from src.models.result import Result
from src.services.http_client import safe_api_call

logger = structlog.get_logger(__name__)

# Nominatim may answer ``null`` instead of ``[]``
_CANDIDATES = TypeAdapter(Optional[list[LocationCandidate]])


class GeocodingClient:
    """Turns a city name into candidate locations."""

    def __init__(self, client: httpx.AsyncClient, base_url: str | None = None):
        self._client = client
        self._base_url = (base_url or get_settings().geocoding_api_base_url).rstrip("/")

    async def _search(self, city: str) -> list[LocationCandidate]:
        response = await self._client.get(
            f"{self._base_url}/search",
            params={"city": city, "format": "jsonv2"},
        )
        response.raise_for_status()
        candidates = _CANDIDATES.validate_json(response.content) or []
        logger.debug("geocoding_candidates_found", city=city, count=len(candidates))
        return candidates

    async def search(self, city: str) -> Result[list[LocationCandidate]]:
        """Look up candidate locations for a city name.

        Args:
            city: City name, passed to the provider as-is

        Returns:
            Ok with a (possibly empty) candidate list in provider order,
            or Err with the classified NetworkError
        """
        return await safe_api_call(lambda: self._search(city), "geocoding")
