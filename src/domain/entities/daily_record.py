"""Daily weather record entity."""

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class DailyRecord:
    """Represents one day of weather observations for a location."""

    date: date
    temp_min: Optional[float] = None  # Celsius
    temp_max: Optional[float] = None  # Celsius
    temp_mean: Optional[float] = None  # Celsius
    precipitation: Optional[float] = None  # mm
    humidity: Optional[float] = None  # percentage
    wind_speed: Optional[float] = None  # km/h
    cloud_cover: Optional[float] = None  # percentage

    @property
    def temp_midpoint(self) -> Optional[float]:
        """Midpoint of the daily minimum and maximum temperature."""
        if self.temp_min is not None and self.temp_max is not None:
            return (self.temp_min + self.temp_max) / 2
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return asdict(self)
