"""Use case assembling the full climate report from the individual analyzers."""

import logging
from typing import Any, Dict, Optional

from ..entities.climate_report import ClimateReport, DataRange
from ..entities.weather_dataset import WeatherDataset
from .aggregate_seasonal_metrics import AggregateSeasonalMetricsUseCase
from .calculate_heat_zone import CalculateHeatZoneUseCase
from .classify_hardiness_zones import ClassifyHardinessZonesUseCase
from .classify_koppen_climate import ClassifyKoppenClimateUseCase
from .estimate_frost_dates import EstimateFrostDatesUseCase
from .estimate_growing_season import EstimateGrowingSeasonUseCase
from .find_coldest_minimum import FindColdestMinimumUseCase
from .generate_gardening_advice import GenerateGardeningAdviceUseCase

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLDS: Dict[str, Any] = {
    "frost_temp": 0.0,
    "growing_temp": 5.0,
    "hot_day_temp": 30.0,
    "full_season_ratio": 0.95,
    "representative_year": 2024,
}


def _round1(value: Optional[float]) -> Optional[float]:
    return None if value is None else round(value, 1)


class AssembleClimateReportUseCase:
    """Use case to run every analyzer on one dataset and build the report.

    The analyzers only read the dataset, so they can run in any order. The
    hardiness classification is the one step fed by another (the coldest
    minimum).
    """

    def __init__(self, thresholds: Optional[Dict[str, Any]] = None):
        """
        Initialize use case.

        Args:
            thresholds: Overrides for frost, growing, hot-day thresholds,
                full-season ratio and representative year
        """
        self.thresholds = {**DEFAULT_THRESHOLDS, **(thresholds or {})}
        t = self.thresholds

        self.coldest_minimum_uc = FindColdestMinimumUseCase()
        self.hardiness_uc = ClassifyHardinessZonesUseCase()
        self.heat_zone_uc = CalculateHeatZoneUseCase(hot_day_temp=t["hot_day_temp"])
        self.koppen_uc = ClassifyKoppenClimateUseCase()
        self.seasonal_uc = AggregateSeasonalMetricsUseCase()
        self.frost_uc = EstimateFrostDatesUseCase(
            frost_temp=t["frost_temp"], representative_year=t["representative_year"]
        )
        self.growing_season_uc = EstimateGrowingSeasonUseCase(
            growing_temp=t["growing_temp"],
            full_season_ratio=t["full_season_ratio"],
            representative_year=t["representative_year"],
        )
        self.advice_uc = GenerateGardeningAdviceUseCase(
            frost_temp=t["frost_temp"], hot_day_temp=t["hot_day_temp"]
        )

    def execute(
        self, dataset: WeatherDataset, latitude: Optional[float] = None
    ) -> ClimateReport:
        """
        Execute report assembly.

        Args:
            dataset: Daily weather records for one location
            latitude: Latitude in degrees, used by the Köppen classification

        Returns:
            A new ClimateReport
        """
        logger.info(f"Computing climate report from {len(dataset)} daily records")

        coldest = self.coldest_minimum_uc.execute(dataset)
        insufficient_data = bool(dataset.to_frame()["temp_min"].isna().all())
        if insufficient_data:
            logger.warning("Dataset has no minimum temperatures, zones are unreliable")

        zones = self.hardiness_uc.execute(coldest)
        heat_zone = self.heat_zone_uc.execute(dataset)
        koppen = self.koppen_uc.execute(dataset, latitude)
        seasonal = self.seasonal_uc.execute(dataset)
        frost_dates = self.frost_uc.execute(dataset)
        growing_season = self.growing_season_uc.execute(dataset)
        advice = self.advice_uc.execute(dataset, zones)

        report = ClimateReport(
            usda_zone=zones.usda_zone,
            rhs_zone=zones.rhs_zone,
            rhs_description=zones.rhs_description,
            hardiness_category=zones.hardiness_category,
            temperature_range=f"{coldest:.1f}°C absolute minimum",
            heat_zone=heat_zone,
            koppen_class=koppen,
            annual_rainfall=round(seasonal.annual_rainfall, 1),
            avg_temp_min=_round1(seasonal.avg_temp_min),
            avg_temp_max=_round1(seasonal.avg_temp_max),
            absolute_min_temp=round(coldest, 1),
            avg_humidity=_round1(seasonal.avg_humidity),
            avg_wind_speed=_round1(seasonal.avg_wind_speed),
            estimated_sunshine_percent=_round1(seasonal.estimated_sunshine_percent),
            sunshine_hours_per_day=_round1(seasonal.sunshine_hours_per_day),
            wettest_month=seasonal.wettest_month,
            wettest_month_precip=round(seasonal.wettest_month_precip, 1),
            driest_month=seasonal.driest_month,
            driest_month_precip=round(seasonal.driest_month_precip, 1),
            monthly_precip_pattern=tuple(
                round(value, 1) for value in seasonal.monthly_precip_pattern
            ),
            frost_dates=frost_dates,
            growing_season=growing_season,
            monthly_data=seasonal.monthly_data,
            gardening_advice=advice,
            data_range=DataRange(
                years_included=tuple(dataset.years), total_days=len(dataset)
            ),
            insufficient_data=insufficient_data,
        )

        logger.info(
            f"Climate report: USDA {report.usda_zone}, RHS {report.rhs_zone}, "
            f"heat zone {report.heat_zone}, Köppen {report.koppen_class}"
        )
        return report


def compute_climate_report(
    dataset: WeatherDataset,
    latitude: Optional[float] = None,
    thresholds: Optional[Dict[str, Any]] = None,
) -> ClimateReport:
    """Compute a climate report for a dataset."""
    return AssembleClimateReportUseCase(thresholds).execute(dataset, latitude)
