"""Use case for estimating the typical growing season."""

import logging
from datetime import date

from ..entities.climate_report import GrowingSeason
from ..entities.weather_dataset import WeatherDataset
from .seasonal_dates import average_month_day, round_half_up

logger = logging.getLogger(__name__)


class EstimateGrowingSeasonUseCase:
    """Use case to find the window where minimum temperatures stay warm."""

    def __init__(
        self,
        growing_temp: float = 5.0,
        full_season_ratio: float = 0.95,
        representative_year: int = 2024,
    ):
        """
        Initialize use case.

        Args:
            growing_temp: Days with ``temp_min`` above this are growing days
            full_season_ratio: Share of growing days from which the whole
                year counts as growing season
            representative_year: Year the averaged dates are expressed in
        """
        self.growing_temp = growing_temp
        self.full_season_ratio = full_season_ratio
        self.representative_year = representative_year

    def _full_year(self) -> GrowingSeason:
        return GrowingSeason(
            start=date(self.representative_year, 1, 1),
            end=date(self.representative_year, 12, 31),
            length_days=365,
        )

    def execute(self, dataset: WeatherDataset) -> GrowingSeason:
        """
        Execute estimation.

        Args:
            dataset: Daily weather records

        Returns:
            GrowingSeason; ``(None, None, 0)`` when no day qualifies
        """
        df = dataset.to_frame()
        growing = df[df["temp_min"] > self.growing_temp]

        if growing.empty:
            logger.info("No growing days found")
            return GrowingSeason()

        ratio = len(growing) / len(df)
        if ratio >= self.full_season_ratio:
            # A few cool days must not truncate a tropical season
            logger.info(f"{ratio:.1%} growing days, treating as year-round season")
            return self._full_year()

        by_year = growing.groupby("year")["date"].agg(["min", "max", "count"])
        result = GrowingSeason(
            start=average_month_day(by_year["min"], self.representative_year),
            end=average_month_day(by_year["max"], self.representative_year),
            length_days=round_half_up(by_year["count"].mean()),
        )
        logger.info(
            f"Growing season over {len(by_year)} years: "
            f"{result.start} to {result.end} ({result.length_days} days)"
        )
        return result
