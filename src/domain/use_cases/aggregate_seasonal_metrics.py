"""Use case for aggregating rainfall, humidity, wind, sunshine and monthly normals."""

import logging
from typing import List, Optional

import numpy as np
import pandas as pd

from ..entities.climate_report import MONTH_NAMES, MonthlyAggregate, SeasonalMetrics
from ..entities.weather_dataset import WeatherDataset

logger = logging.getLogger(__name__)

MONTHS = range(1, 13)


def mean_or_none(series: pd.Series) -> Optional[float]:
    """Mean over non-null values, None if there are none."""
    value = series.mean()
    return None if pd.isna(value) else float(value)


class AggregateSeasonalMetricsUseCase:
    """Use case to compute seasonal climate metrics from daily records."""

    def __init__(self, days_per_month: int = 30, daylight_hours: float = 12.0):
        """
        Initialize use case.

        Args:
            days_per_month: Factor turning mean daily rainfall into a
                monthly total
            daylight_hours: Fixed day length used for sunshine hours
        """
        self.days_per_month = days_per_month
        self.daylight_hours = daylight_hours

    def _monthly_precip_pattern(self, df: pd.DataFrame) -> List[float]:
        daily_mean = df.groupby("month")["precipitation"].mean()
        pattern = daily_mean.reindex(MONTHS).fillna(0.0) * self.days_per_month
        return [float(value) for value in pattern]

    @staticmethod
    def _monthly_data(df: pd.DataFrame) -> List[MonthlyAggregate]:
        midpoint = (df["temp_min"] + df["temp_max"]) / 2
        result = []
        for month in MONTHS:
            mask = df["month"] == month
            result.append(
                MonthlyAggregate(
                    month=month,
                    temp_avg=mean_or_none(midpoint[mask]),
                    precip_total=float(df.loc[mask, "precipitation"].sum()),
                    day_count=int(mask.sum()),
                )
            )
        return result

    def execute(self, dataset: WeatherDataset) -> SeasonalMetrics:
        """
        Execute aggregation.

        Args:
            dataset: Daily weather records

        Returns:
            SeasonalMetrics with unrounded values
        """
        df = dataset.to_frame()
        logger.info(f"Aggregating seasonal metrics over {len(df)} days")

        years = max(1, df["year"].nunique())
        annual_rainfall = float(df["precipitation"].sum()) / years

        avg_cloud_cover = mean_or_none(df["cloud_cover"])
        if avg_cloud_cover is None:
            sunshine_percent = None
            sunshine_hours = None
        else:
            sunshine_percent = 100 - avg_cloud_cover
            sunshine_hours = sunshine_percent / 100 * self.daylight_hours

        pattern = self._monthly_precip_pattern(df)
        wettest = int(np.argmax(pattern))
        driest = int(np.argmin(pattern))

        return SeasonalMetrics(
            annual_rainfall=annual_rainfall,
            avg_temp_min=mean_or_none(df["temp_min"]),
            avg_temp_max=mean_or_none(df["temp_max"]),
            avg_humidity=mean_or_none(df["humidity"]),
            avg_wind_speed=mean_or_none(df["wind_speed"]),
            estimated_sunshine_percent=sunshine_percent,
            sunshine_hours_per_day=sunshine_hours,
            wettest_month=MONTH_NAMES[wettest],
            wettest_month_precip=pattern[wettest],
            driest_month=MONTH_NAMES[driest],
            driest_month_precip=pattern[driest],
            monthly_precip_pattern=tuple(pattern),
            monthly_data=tuple(self._monthly_data(df)),
        )
