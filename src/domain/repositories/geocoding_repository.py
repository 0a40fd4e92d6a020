"""Geocoding repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from ..entities.location import Location


class GeocodingRepository(ABC):
    """Abstract repository resolving place names to coordinates."""

    @abstractmethod
    def geocode(self, query: str) -> Optional[Location]:
        """
        Resolve a place name.

        Args:
            query: Free-form place name or address

        Returns:
            Location with coordinates, or None if nothing matched
        """
        pass
