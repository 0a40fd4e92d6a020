"""Use case for rule-based gardening advice."""

import logging
from typing import List

from ..entities.climate_report import HardinessZones
from ..entities.weather_dataset import WeatherDataset

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365

COLD_CLIMATE_ADVICE = (
    "Cold climate: choose perennials, shrubs and fruit rated to your zone or colder, "
    "start tender vegetables indoors and favour fast-maturing cultivars for the short season."
)
TEMPERATE_CLIMATE_ADVICE = (
    "Temperate climate: most cottage-garden perennials, roses and Mediterranean herbs thrive; "
    "use evergreen structure and winter-flowering shrubs to keep interest through the cold months."
)
WARM_CLIMATE_ADVICE = (
    "Warm climate: tender and subtropical plants can stay outdoors all year; "
    "plan shade for the hottest months and grow cool-season crops through winter."
)
DRY_ADVICE = (
    "Low rainfall: group plants by water needs, mulch deeply and prefer "
    "drought-tolerant species with drip irrigation."
)
WET_ADVICE = (
    "High rainfall: improve drainage with raised beds and organic matter, "
    "and choose plants that tolerate moist soil."
)
FROST_ADVICE = (
    "Frequent frost ({frost_days} days a year): keep fleece and cloches ready, "
    "and wait for the soil to warm before planting out."
)
HEAT_ADVICE = (
    "Frequent heat ({hot_days} days a year at 30°C or above): water early in the morning "
    "and provide afternoon shade for leafy crops."
)


class GenerateGardeningAdviceUseCase:
    """Use case to turn climate indicators into short planting guidance."""

    def __init__(
        self,
        frost_temp: float = 0.0,
        hot_day_temp: float = 30.0,
        dry_daily_rainfall: float = 1.5,
        wet_daily_rainfall: float = 3.0,
        frequent_frost_days: int = 100,
        frequent_hot_days: int = 60,
    ):
        self.frost_temp = frost_temp
        self.hot_day_temp = hot_day_temp
        self.dry_daily_rainfall = dry_daily_rainfall
        self.wet_daily_rainfall = wet_daily_rainfall
        self.frequent_frost_days = frequent_frost_days
        self.frequent_hot_days = frequent_hot_days

    def execute(self, dataset: WeatherDataset, zones: HardinessZones) -> str:
        """
        Execute the use case.

        Args:
            dataset: Daily weather records
            zones: Hardiness classification of the same dataset

        Returns:
            Advice paragraphs joined into one string
        """
        df = dataset.to_frame()
        years = max(1.0, len(df) / DAYS_PER_YEAR)
        frost_days = int(round((df["temp_min"] <= self.frost_temp).sum() / years))
        hot_days = int(round((df["temp_max"] >= self.hot_day_temp).sum() / years))
        daily_rainfall = df["precipitation"].mean()

        advice: List[str] = []
        if zones.zone_number <= 6:
            advice.append(COLD_CLIMATE_ADVICE)
        elif zones.zone_number <= 8:
            advice.append(TEMPERATE_CLIMATE_ADVICE)
        else:
            advice.append(WARM_CLIMATE_ADVICE)

        # NaN compares False, so missing rainfall adds nothing
        if daily_rainfall < self.dry_daily_rainfall:
            advice.append(DRY_ADVICE)
        elif daily_rainfall > self.wet_daily_rainfall:
            advice.append(WET_ADVICE)

        if frost_days > self.frequent_frost_days:
            advice.append(FROST_ADVICE.format(frost_days=frost_days))
        if hot_days > self.frequent_hot_days:
            advice.append(HEAT_ADVICE.format(hot_days=hot_days))

        logger.debug(f"Generated {len(advice)} advice items")
        return " ".join(advice)
