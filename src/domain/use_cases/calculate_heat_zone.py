"""Use case for calculating the AHS heat zone."""

import logging

from ..entities.weather_dataset import WeatherDataset
from ..entities.zone_boundary_table import HEAT_ZONE_TABLE, ZoneBoundaryTable

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365


class CalculateHeatZoneUseCase:
    """Use case to derive the heat zone from the yearly count of hot days."""

    def __init__(
        self,
        hot_day_temp: float = 30.0,
        heat_zone_table: ZoneBoundaryTable = HEAT_ZONE_TABLE,
    ):
        """
        Initialize use case.

        Args:
            hot_day_temp: Days with ``temp_max`` above this count as hot
            heat_zone_table: Bands of average hot days per year
        """
        self.hot_day_temp = hot_day_temp
        self.heat_zone_table = heat_zone_table

    def hot_days_per_year(self, dataset: WeatherDataset) -> float:
        """Average number of hot days per 365 recorded days."""
        df = dataset.to_frame()
        hot_days = int((df["temp_max"] > self.hot_day_temp).sum())
        years = max(1.0, len(df) / DAYS_PER_YEAR)
        return hot_days / years

    def zone_for(self, hot_days_per_year: float) -> int:
        """Map an average hot-day count to a zone from 1 to 12."""
        return int(self.heat_zone_table.lookup(hot_days_per_year))

    def execute(self, dataset: WeatherDataset) -> int:
        """
        Execute the use case.

        Args:
            dataset: Daily weather records

        Returns:
            Heat zone from 1 to 12
        """
        average = self.hot_days_per_year(dataset)
        zone = self.zone_for(average)
        logger.debug(f"{average:.1f} hot days per year -> heat zone {zone}")
        return zone
