"""Domain entities."""

from .location import Location
from .daily_record import DailyRecord
from .weather_dataset import WeatherDataset
from .hardiness_category import HardinessCategory
from .zone_boundary_table import (
    ZoneBand,
    ZoneBoundaryTable,
    USDA_ZONE_TABLE,
    RHS_RATING_TABLE,
    HEAT_ZONE_TABLE,
)
from .climate_report import (
    ClimateReport,
    DataRange,
    FrostDates,
    GrowingSeason,
    HardinessZones,
    KoppenClass,
    MonthlyAggregate,
    SeasonalMetrics,
    StoredClimateReport,
)

__all__ = [
    "Location",
    "DailyRecord",
    "WeatherDataset",
    "HardinessCategory",
    "ZoneBand",
    "ZoneBoundaryTable",
    "USDA_ZONE_TABLE",
    "RHS_RATING_TABLE",
    "HEAT_ZONE_TABLE",
    "ClimateReport",
    "DataRange",
    "FrostDates",
    "GrowingSeason",
    "HardinessZones",
    "KoppenClass",
    "MonthlyAggregate",
    "SeasonalMetrics",
    "StoredClimateReport",
]
