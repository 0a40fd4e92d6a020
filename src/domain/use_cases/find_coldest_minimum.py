"""Use case for finding the coldest recorded minimum temperature."""

import logging

import pandas as pd

from ..entities.weather_dataset import WeatherDataset

logger = logging.getLogger(__name__)

# Returned when no record carries a minimum temperature.
NO_DATA_SENTINEL = 0.0


class FindColdestMinimumUseCase:
    """Use case to find the absolute minimum temperature of a dataset.

    Hardiness zones are defined by the single worst cold event on record,
    not by a typical winter, so this is the minimum over the whole span.
    """

    def execute(self, dataset: WeatherDataset) -> float:
        """
        Execute the use case.

        Args:
            dataset: Daily weather records

        Returns:
            Coldest ``temp_min`` in Celsius, or 0.0 if none is present
        """
        coldest = dataset.to_frame()["temp_min"].min()
        if pd.isna(coldest):
            logger.warning(
                "No minimum temperatures in dataset, "
                f"falling back to {NO_DATA_SENTINEL}°C"
            )
            return NO_DATA_SENTINEL
        return float(coldest)
