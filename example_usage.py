"""Example usage of the garden climate engine."""

import logging
import math
from datetime import date, timedelta

from src.domain.entities import DailyRecord, WeatherDataset
from src.domain.use_cases import compute_climate_report
from config.settings import CLIMATE_THRESHOLDS, LOG_FORMAT

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


def synthetic_records(start_year: int, years: int):
    """Build a smooth temperate climate with a cold January and a warm July."""
    day = date(start_year, 1, 1)
    end = date(start_year + years, 1, 1)
    while day < end:
        phase = 2 * math.pi * (day.timetuple().tm_yday - 15) / 365
        mean = 11 - 9 * math.cos(phase)
        yield DailyRecord(
            date=day,
            temp_min=mean - 5,
            temp_max=mean + 5,
            temp_mean=mean,
            precipitation=2.5 + 1.0 * math.cos(phase),
            humidity=78.0,
            wind_speed=14.0,
            cloud_cover=60.0,
        )
        day += timedelta(days=1)


def main():
    """Example usage."""
    dataset = WeatherDataset.from_records(synthetic_records(2005, 10))
    report = compute_climate_report(dataset, latitude=51.5, thresholds=CLIMATE_THRESHOLDS)

    print("=" * 60)
    print("Climate report for a synthetic temperate location")
    print("=" * 60)
    print(f"  USDA zone:      {report.usda_zone} ({report.hardiness_category.value})")
    print(f"  RHS rating:     {report.rhs_zone}")
    print(f"  Heat zone:      {report.heat_zone}")
    print(f"  Köppen:         {report.koppen_class}")
    print(f"  Rainfall:       {report.annual_rainfall} mm/year")
    print(f"  Frost dates:    {report.frost_dates.last_spring} / {report.frost_dates.first_fall}")
    print(
        f"  Growing season: {report.growing_season.start} to {report.growing_season.end} "
        f"({report.growing_season.length_days} days)"
    )


if __name__ == "__main__":
    main()
