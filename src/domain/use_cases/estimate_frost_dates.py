"""Use case for estimating typical frost dates."""

import logging

from ..entities.climate_report import FrostDates
from ..entities.weather_dataset import WeatherDataset
from .seasonal_dates import average_month_day

logger = logging.getLogger(__name__)

# Months 1-6 are spring, 7-12 are fall.
LAST_SPRING_MONTH = 6


class EstimateFrostDatesUseCase:
    """Use case to find the average last spring and first fall frost.

    For each calendar year the latest frost day of January-June and the
    earliest frost day of July-December are taken. Their months and days
    are then averaged independently across years.
    """

    def __init__(self, frost_temp: float = 0.0, representative_year: int = 2024):
        """
        Initialize use case.

        Args:
            frost_temp: Days with ``temp_min`` at or below this are frost days
            representative_year: Year the averaged dates are expressed in
        """
        self.frost_temp = frost_temp
        self.representative_year = representative_year

    def execute(self, dataset: WeatherDataset) -> FrostDates:
        """
        Execute estimation.

        Args:
            dataset: Daily weather records

        Returns:
            FrostDates; both dates are None for a frost-free climate
        """
        df = dataset.to_frame()
        frost = df[df["temp_min"] <= self.frost_temp]

        spring = frost[frost["month"] <= LAST_SPRING_MONTH]
        fall = frost[frost["month"] > LAST_SPRING_MONTH]
        last_spring_by_year = spring.groupby("year")["date"].max()
        first_fall_by_year = fall.groupby("year")["date"].min()

        if last_spring_by_year.empty and first_fall_by_year.empty:
            logger.info("No frost days found, frost-free climate")
            return FrostDates()

        result = FrostDates(
            last_spring=average_month_day(last_spring_by_year, self.representative_year),
            first_fall=average_month_day(first_fall_by_year, self.representative_year),
        )
        logger.info(
            f"Frost dates from {len(frost)} frost days: "
            f"last spring {result.last_spring}, first fall {result.first_fall}"
        )
        return result
