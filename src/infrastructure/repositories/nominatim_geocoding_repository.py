"""Nominatim (OpenStreetMap) geocoding repository implementation."""

import logging
from typing import Optional

from geopy.exc import GeopyError
from geopy.geocoders import Nominatim

from ...domain.entities.location import Location
from ...domain.exceptions import LocationNotFoundError
from ...domain.repositories.geocoding_repository import GeocodingRepository

logger = logging.getLogger(__name__)


class NominatimGeocodingRepository(GeocodingRepository):
    """Repository resolving place names through geopy's Nominatim geocoder."""

    def __init__(self, user_agent: str = "garden-climate-engine", timeout: int = 10, geolocator=None):
        self.geolocator = geolocator or Nominatim(user_agent=user_agent, timeout=timeout)

    def geocode(self, query: str) -> Optional[Location]:
        """Geocode a place name to a Location."""
        try:
            result = self.geolocator.geocode(query)
        except GeopyError as e:
            logger.error(f"Geocoding failed for {query!r}: {e}")
            raise LocationNotFoundError(f"Geocoding failed for {query!r}") from e

        if result is None:
            logger.warning(f"No geocoding match for {query!r}")
            return None

        logger.info(f"Geocoded {query!r} to ({result.latitude}, {result.longitude})")
        return Location(name=query, latitude=result.latitude, longitude=result.longitude)
