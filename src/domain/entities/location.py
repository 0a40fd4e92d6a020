"""Location entity."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Location:
    """Represents a garden location, optionally resolved to coordinates."""

    name: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def key(self) -> str:
        """Normalized key used to store reports for this location."""
        return " ".join(self.name.lower().split())

    def __str__(self) -> str:
        return self.name
