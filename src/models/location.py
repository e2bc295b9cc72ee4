"""Geocoding models for the OpenStreetMap Nominatim API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LocationCandidate(BaseModel):
    """One place returned by a Nominatim ``search`` (``format=jsonv2``).

    Coordinates stay as the provider's decimal strings; they are passed to
    the forecast API unchanged.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    lat: str = Field(..., description="Latitude as a decimal string")
    lon: str = Field(..., description="Longitude as a decimal string")
    display_name: str = Field(..., description="Full formatted place name")

    place_id: Optional[int] = None
    osm_type: Optional[str] = None
    osm_id: Optional[int] = None
    name: Optional[str] = None
    type: Optional[str] = None
    addresstype: Optional[str] = None
    importance: Optional[float] = None
    boundingbox: list[str] = Field(default_factory=list)
