"""Use cases - core business operations."""

from .collect_weather_data import CollectWeatherDataUseCase
from .find_coldest_minimum import FindColdestMinimumUseCase
from .classify_hardiness_zones import ClassifyHardinessZonesUseCase
from .calculate_heat_zone import CalculateHeatZoneUseCase
from .classify_koppen_climate import ClassifyKoppenClimateUseCase
from .aggregate_seasonal_metrics import AggregateSeasonalMetricsUseCase
from .estimate_frost_dates import EstimateFrostDatesUseCase
from .estimate_growing_season import EstimateGrowingSeasonUseCase
from .generate_gardening_advice import GenerateGardeningAdviceUseCase
from .assemble_climate_report import AssembleClimateReportUseCase, compute_climate_report

__all__ = [
    "CollectWeatherDataUseCase",
    "FindColdestMinimumUseCase",
    "ClassifyHardinessZonesUseCase",
    "CalculateHeatZoneUseCase",
    "ClassifyKoppenClimateUseCase",
    "AggregateSeasonalMetricsUseCase",
    "EstimateFrostDatesUseCase",
    "EstimateGrowingSeasonUseCase",
    "GenerateGardeningAdviceUseCase",
    "AssembleClimateReportUseCase",
    "compute_climate_report",
]
