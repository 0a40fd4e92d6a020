"""Shared pytest fixtures."""

from datetime import date, timedelta
from typing import Dict, List, Optional

import pytest
from requests_mock import Mocker

from src.domain.entities.climate_report import StoredClimateReport
from src.domain.entities.daily_record import DailyRecord
from src.domain.entities.location import Location
from src.domain.entities.weather_dataset import WeatherDataset
from src.domain.repositories.climate_report_repository import ClimateReportRepository
from src.domain.repositories.geocoding_repository import GeocodingRepository
from src.domain.repositories.weather_repository import WeatherRepository


def _value(value, day):
    return value(day) if callable(value) else value


def daily_records(start: date, end: date, **fields) -> List[DailyRecord]:
    records = []
    day = start
    while day <= end:
        records.append(
            DailyRecord(date=day, **{name: _value(value, day) for name, value in fields.items()})
        )
        day += timedelta(days=1)
    return records


class StaticWeatherRepository(WeatherRepository):
    """Returns the same records for every request and remembers the calls."""

    def __init__(self, records: List[DailyRecord]):
        self.records = records
        self.calls = []

    def get_daily_records(self, location, start_date, end_date):
        self.calls.append((location, start_date, end_date))
        return list(self.records)


class InMemoryClimateReportRepository(ClimateReportRepository):
    def __init__(self):
        self.reports: Dict[str, StoredClimateReport] = {}

    def save_report(self, stored):
        self.reports[stored.location.key] = stored
        return f"memory://{stored.location.key}"

    def get_report(self, location_key) -> Optional[StoredClimateReport]:
        return self.reports.get(location_key)

    def report_exists(self, location_key):
        return location_key in self.reports


class StaticGeocoder(GeocodingRepository):
    def __init__(self, places: Dict[str, tuple]):
        self.places = places

    def geocode(self, query):
        if query not in self.places:
            return None
        latitude, longitude = self.places[query]
        return Location(name=query, latitude=latitude, longitude=longitude)


@pytest.fixture
def make_dataset():
    """
    Build a dataset with one record per day from ``start`` to ``end`` inclusive.

    Keyword arguments set DailyRecord fields, either as constants or as
    callables taking the record's date.
    """

    def _make(start: date, end: date, **fields) -> WeatherDataset:
        return WeatherDataset.from_records(daily_records(start, end, **fields))

    return _make


@pytest.fixture
def temperate_records():
    """Three years of a mild climate: frosty winters, warm summers, steady rain."""
    summer = {6: 16.0, 7: 18.0, 8: 17.0}
    return daily_records(
        date(2020, 1, 1),
        date(2022, 12, 31),
        temp_min=lambda d: -8.0 if d.month == 1 and d.day == 20 else (
            -2.0 if d.month in (1, 2, 12) else summer.get(d.month, 6.0)
        ),
        temp_max=lambda d: 31.0 if d.month == 7 and d.day <= 5 else (
            6.0 if d.month in (1, 2, 12) else 20.0
        ),
        precipitation=lambda d: 3.0 if d.month in (10, 11) else 2.0,
        humidity=80.0,
        wind_speed=12.0,
        cloud_cover=55.0,
    )


@pytest.fixture
def weather_repo(temperate_records):
    return StaticWeatherRepository(temperate_records)


@pytest.fixture
def report_repo():
    return InMemoryClimateReportRepository()


@pytest.fixture
def geocoder():
    return StaticGeocoder({"Bristol, UK": (51.45, -2.59)})


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock
