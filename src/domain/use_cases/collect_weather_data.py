"""Use case for collecting historical weather data."""

import logging
from datetime import date
from typing import Optional, Tuple

from ..entities.location import Location
from ..entities.weather_dataset import WeatherDataset
from ..repositories.weather_repository import WeatherRepository

logger = logging.getLogger(__name__)


def history_window(years: int, end_date: Optional[date] = None) -> Tuple[date, date]:
    """Date range covering the given number of years up to ``end_date``."""
    end_date = end_date or date.today()
    try:
        start_date = end_date.replace(year=end_date.year - years)
    except ValueError:
        # February 29th in a non-leap start year
        start_date = end_date.replace(year=end_date.year - years, day=28)
    return start_date, end_date


class CollectWeatherDataUseCase:
    """Use case to collect a weather dataset from a repository."""

    def __init__(self, repository: WeatherRepository):
        """
        Initialize use case.

        Args:
            repository: Repository for weather data access
        """
        self.repository = repository

    def execute(
        self,
        location: Location,
        start_date: date,
        end_date: date,
    ) -> WeatherDataset:
        """
        Execute the use case.

        Args:
            location: Location with coordinates
            start_date: Start date (inclusive)
            end_date: End date (inclusive)

        Returns:
            WeatherDataset for the location
        """
        logger.info(
            f"Collecting weather data: location={location}, "
            f"start={start_date}, end={end_date}"
        )
        records = self.repository.get_daily_records(location, start_date, end_date)
        logger.info(f"Collected {len(records)} weather records")
        return WeatherDataset.from_records(records, location=location)
