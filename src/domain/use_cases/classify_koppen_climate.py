"""Use case for the simplified Köppen climate classification."""

import logging
from typing import Optional

import pandas as pd

from ..entities.climate_report import KoppenClass
from ..entities.weather_dataset import WeatherDataset

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365


class ClassifyKoppenClimateUseCase:
    """Use case to classify a climate from monthly temperature and rainfall.

    This is a simplified decision tree, not a full Köppen-Geiger
    implementation. Branches are checked in a fixed order and borderline
    values resolve to the first branch that matches.
    """

    def __init__(self, temperate_latitude_limit: float = 40.0):
        """
        Initialize use case.

        Args:
            temperate_latitude_limit: Absolute latitude separating the
                subtropical and oceanic temperate branches
        """
        self.temperate_latitude_limit = temperate_latitude_limit

    @staticmethod
    def _daily_temperature(df: pd.DataFrame) -> pd.Series:
        midpoint = (df["temp_min"] + df["temp_max"]) / 2
        return df["temp_mean"].fillna(midpoint)

    def classify(
        self,
        coldest_month: float,
        hottest_month: float,
        avg_precip_per_year: float,
        avg_temp: float,
        latitude: Optional[float] = None,
    ) -> KoppenClass:
        """
        Apply the decision tree to precomputed climate normals.

        Args:
            coldest_month: Mean temperature of the coldest calendar month
            hottest_month: Mean temperature of the hottest calendar month
            avg_precip_per_year: Mean yearly precipitation in mm
            avg_temp: Mean daily temperature over the whole dataset
            latitude: Latitude in degrees, None is treated as the equator

        Returns:
            Köppen code and description
        """
        latitude = latitude or 0.0

        # Tropical (A)
        if coldest_month >= 18:
            if avg_precip_per_year > 1500:
                return KoppenClass("Af", "Tropical rainforest")
            if avg_precip_per_year > 600:
                return KoppenClass("Aw", "Tropical savanna")
            return KoppenClass("Am", "Tropical monsoon")

        # Continental (D)
        if coldest_month <= -3:
            if avg_precip_per_year > 600:
                if hottest_month > 22:
                    return KoppenClass("Dfa", "Hot summer continental")
                return KoppenClass("Dfb", "Warm summer continental")
            return KoppenClass("Dfc", "Subarctic")

        # Arid (B)
        if avg_precip_per_year < 500:
            if avg_temp > 18:
                return KoppenClass("BWh", "Hot desert")
            return KoppenClass("BSk", "Cold steppe")

        # Temperate (C)
        if abs(latitude) < self.temperate_latitude_limit:
            if avg_precip_per_year > 1000:
                if hottest_month > 22:
                    return KoppenClass("Cfa", "Humid subtropical")
                return KoppenClass("Cfb", "Oceanic")
            return KoppenClass("Csa", "Mediterranean")
        if hottest_month > 22:
            return KoppenClass("Cfb", "Oceanic")
        return KoppenClass("Cfc", "Subpolar oceanic")

    def execute(
        self, dataset: WeatherDataset, latitude: Optional[float] = None
    ) -> Optional[KoppenClass]:
        """
        Execute classification.

        Args:
            dataset: Daily weather records
            latitude: Latitude of the location in degrees

        Returns:
            Köppen class, or None when the dataset has no temperatures
            (instead of falling through to the tropical branch)
        """
        df = dataset.to_frame()
        df["temp"] = self._daily_temperature(df)

        monthly_temp = df.groupby("month")["temp"].mean().dropna()
        if monthly_temp.empty:
            logger.warning("No temperature data, skipping Köppen classification")
            return None

        years = max(1.0, len(df) / DAYS_PER_YEAR)
        avg_precip_per_year = float(df["precipitation"].sum()) / years

        result = self.classify(
            coldest_month=float(monthly_temp.min()),
            hottest_month=float(monthly_temp.max()),
            avg_precip_per_year=avg_precip_per_year,
            avg_temp=float(df["temp"].mean()),
            latitude=latitude,
        )
        logger.debug(f"Köppen classification: {result}")
        return result
