"""Weather repository interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List
from ..entities.daily_record import DailyRecord
from ..entities.location import Location


class WeatherRepository(ABC):
    """Abstract repository for historical daily weather access."""

    @abstractmethod
    def get_daily_records(
        self,
        location: Location,
        start_date: date,
        end_date: date,
    ) -> List[DailyRecord]:
        """
        Retrieve daily weather records for a location within a date range.

        Args:
            location: Location to fetch weather for
            start_date: Start date (inclusive)
            end_date: End date (inclusive)

        Returns:
            List of DailyRecord entities
        """
        pass
