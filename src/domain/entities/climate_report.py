"""Climate report entities."""

from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple

from .hardiness_category import HardinessCategory
from .location import Location

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]


def _iso(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value else None


def _parse_date(value: Optional[str]) -> Optional[date]:
    return date.fromisoformat(value) if value else None


@dataclass(frozen=True)
class KoppenClass:
    """Simplified Köppen climate classification."""

    code: str  # e.g. 'Dfb'
    description: str  # e.g. 'Warm summer continental'

    @classmethod
    def parse(cls, label: str) -> "KoppenClass":
        code, _, description = label.partition(" - ")
        return cls(code=code, description=description)

    def __str__(self) -> str:
        return f"{self.code} - {self.description}"


@dataclass(frozen=True)
class HardinessZones:
    """Result of classifying a coldest-minimum temperature."""

    usda_zone: str
    rhs_zone: str
    rhs_description: str
    hardiness_category: HardinessCategory
    zone_number: int


@dataclass(frozen=True)
class FrostDates:
    """Typical last spring and first fall frost, in the representative year."""

    last_spring: Optional[date] = None
    first_fall: Optional[date] = None

    @property
    def frost_free(self) -> bool:
        return self.last_spring is None and self.first_fall is None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"last_spring": _iso(self.last_spring), "first_fall": _iso(self.first_fall)}


@dataclass(frozen=True)
class GrowingSeason:
    """Typical growing-season window, in the representative year."""

    start: Optional[date] = None
    end: Optional[date] = None
    length_days: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": _iso(self.start),
            "end": _iso(self.end),
            "length_days": self.length_days,
        }


@dataclass(frozen=True)
class MonthlyAggregate:
    """Aggregated observations for one calendar month across all years."""

    month: int  # 1-12
    temp_avg: Optional[float]
    precip_total: float
    day_count: int

    @property
    def name(self) -> str:
        return MONTH_NAMES[self.month - 1]


@dataclass(frozen=True)
class SeasonalMetrics:
    """Rainfall, humidity, wind, sunshine and monthly normals."""

    annual_rainfall: float
    avg_temp_min: Optional[float]
    avg_temp_max: Optional[float]
    avg_humidity: Optional[float]
    avg_wind_speed: Optional[float]
    estimated_sunshine_percent: Optional[float]
    sunshine_hours_per_day: Optional[float]
    wettest_month: str
    wettest_month_precip: float
    driest_month: str
    driest_month_precip: float
    monthly_precip_pattern: Tuple[float, ...]
    monthly_data: Tuple[MonthlyAggregate, ...]


@dataclass(frozen=True)
class DataRange:
    """Span of the observations a report was computed from."""

    years_included: Tuple[int, ...] = ()
    total_days: int = 0

    @property
    def total_years(self) -> int:
        return len(self.years_included)

    @property
    def label(self) -> str:
        if not self.years_included:
            return "no historical data"
        return f"historical data {self.years_included[0]} - {self.years_included[-1]}"


@dataclass(frozen=True)
class ClimateReport:
    """Immutable horticultural climate summary for one location.

    ``avg_temp_min`` is the mean of the daily minimums. Earlier stored
    reports used that key for the absolute coldest minimum, which is now
    ``absolute_min_temp``.
    """

    usda_zone: str
    rhs_zone: str
    rhs_description: str
    hardiness_category: HardinessCategory
    temperature_range: str
    heat_zone: int
    koppen_class: Optional[KoppenClass]
    annual_rainfall: float
    avg_temp_min: Optional[float]
    avg_temp_max: Optional[float]
    absolute_min_temp: float
    avg_humidity: Optional[float]
    avg_wind_speed: Optional[float]
    estimated_sunshine_percent: Optional[float]
    sunshine_hours_per_day: Optional[float]
    wettest_month: str
    wettest_month_precip: float
    driest_month: str
    driest_month_precip: float
    monthly_precip_pattern: Tuple[float, ...]
    frost_dates: FrostDates
    growing_season: GrowingSeason
    monthly_data: Tuple[MonthlyAggregate, ...]
    gardening_advice: str = ""
    data_range: DataRange = field(default_factory=DataRange)
    # True when no usable minimum temperature existed and the zones were
    # derived from the 0°C sentinel.
    insufficient_data: bool = False

    @property
    def hardiness_zone(self) -> str:
        """Combined label, e.g. ``'8a / H4'``."""
        return f"{self.usda_zone} / {self.rhs_zone}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        data = asdict(self)
        data["hardiness_category"] = self.hardiness_category.value
        data["koppen_class"] = str(self.koppen_class) if self.koppen_class else None
        data["monthly_precip_pattern"] = list(self.monthly_precip_pattern)
        data["frost_dates"] = self.frost_dates.to_dict()
        data["growing_season"] = self.growing_season.to_dict()
        data["monthly_data"] = [asdict(m) for m in self.monthly_data]
        data["data_range"] = {
            "years_included": list(self.data_range.years_included),
            "total_years": self.data_range.total_years,
            "total_days": self.data_range.total_days,
            "date_range": self.data_range.label,
        }
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClimateReport":
        """Rebuild a report produced by :meth:`to_dict`."""
        frost = data.get("frost_dates") or {}
        season = data.get("growing_season") or {}
        data_range = data.get("data_range") or {}
        koppen = data.get("koppen_class")
        return cls(
            usda_zone=data["usda_zone"],
            rhs_zone=data["rhs_zone"],
            rhs_description=data.get("rhs_description", ""),
            hardiness_category=HardinessCategory(data["hardiness_category"]),
            temperature_range=data.get("temperature_range", ""),
            heat_zone=int(data["heat_zone"]),
            koppen_class=KoppenClass.parse(koppen) if koppen else None,
            annual_rainfall=data["annual_rainfall"],
            avg_temp_min=data.get("avg_temp_min"),
            avg_temp_max=data.get("avg_temp_max"),
            absolute_min_temp=data["absolute_min_temp"],
            avg_humidity=data.get("avg_humidity"),
            avg_wind_speed=data.get("avg_wind_speed"),
            estimated_sunshine_percent=data.get("estimated_sunshine_percent"),
            sunshine_hours_per_day=data.get("sunshine_hours_per_day"),
            wettest_month=data["wettest_month"],
            wettest_month_precip=data["wettest_month_precip"],
            driest_month=data["driest_month"],
            driest_month_precip=data["driest_month_precip"],
            monthly_precip_pattern=tuple(data["monthly_precip_pattern"]),
            frost_dates=FrostDates(
                last_spring=_parse_date(frost.get("last_spring")),
                first_fall=_parse_date(frost.get("first_fall")),
            ),
            growing_season=GrowingSeason(
                start=_parse_date(season.get("start")),
                end=_parse_date(season.get("end")),
                length_days=int(season.get("length_days", 0)),
            ),
            monthly_data=tuple(MonthlyAggregate(**m) for m in data.get("monthly_data", [])),
            gardening_advice=data.get("gardening_advice", ""),
            data_range=DataRange(
                years_included=tuple(data_range.get("years_included", [])),
                total_days=int(data_range.get("total_days", 0)),
            ),
            insufficient_data=bool(data.get("insufficient_data", False)),
        )


@dataclass
class StoredClimateReport:
    """A persisted report together with the time it was computed."""

    location: Location
    report: ClimateReport
    last_updated: datetime
    data_source: str = "unknown"

    def age_days(self, now: Optional[datetime] = None) -> int:
        """Whole days elapsed since the report was computed."""
        now = now or datetime.now()
        return (now - self.last_updated).days

    def __str__(self) -> str:
        return f"{self.location}_{self.last_updated:%Y%m%d}"
