"""Tests for ClimateReportService."""

from datetime import date, datetime, timedelta

import pytest
from src.application.services.climate_report_service import (
    ClimateReportService,
    is_report_stale,
)
from src.domain.entities.location import Location
from src.domain.entities.weather_dataset import WeatherDataset
from src.domain.exceptions import LocationNotFoundError, WeatherDataUnavailableError
from src.domain.use_cases.collect_weather_data import history_window


@pytest.fixture
def service(weather_repo, report_repo, geocoder):
    return ClimateReportService(weather_repo, report_repo, geocoder=geocoder)


def _age(service, key, days):
    stored = service.report_repo.get_report(key)
    stored.last_updated = datetime.now() - timedelta(days=days)


def test_computes_and_stores_missing_report(service, weather_repo, report_repo):
    """A location without a stored report is fetched, analyzed and saved."""
    stored = service.get_climate_report("Bristol, UK")

    assert stored.location.latitude == 51.45
    assert stored.data_source == "open-meteo"
    assert stored.report.usda_zone == "8b"
    assert stored.report.koppen_class.code == "Cfc"
    assert report_repo.report_exists("bristol, uk")
    assert len(weather_repo.calls) == 1

    _, start, end = weather_repo.calls[0]
    assert end.year - start.year == 20


def test_fresh_report_is_reused(service, weather_repo):
    """A report younger than six months is returned without refetching."""
    first = service.get_climate_report("Bristol, UK")
    _age(service, "bristol, uk", 30)
    second = service.get_climate_report("bristol,  UK")

    assert second.report == first.report
    assert len(weather_repo.calls) == 1


def test_stale_report_is_refreshed(service, weather_repo):
    """A report older than six months is recomputed."""
    service.get_climate_report("Bristol, UK")
    _age(service, "bristol, uk", 200)
    stored = service.get_climate_report("Bristol, UK")

    assert len(weather_repo.calls) == 2
    assert stored.age_days() == 0


def test_force_refresh(service, weather_repo):
    """force_refresh ignores a fresh stored report."""
    service.get_climate_report("Bristol, UK")
    service.get_climate_report("Bristol, UK", force_refresh=True)
    assert len(weather_repo.calls) == 2


def test_coordinates_skip_geocoding(weather_repo, report_repo):
    """Explicit coordinates are used as given."""
    service = ClimateReportService(weather_repo, report_repo)
    stored = service.get_climate_report("My Allotment", latitude=35.0, longitude=-5.0)

    location, _, _ = weather_repo.calls[0]
    assert location == Location("My Allotment", 35.0, -5.0)
    assert stored.report.koppen_class.code == "Csa"


def test_unknown_location(service, weather_repo):
    """A place the geocoder cannot find raises LocationNotFoundError."""
    with pytest.raises(LocationNotFoundError):
        service.get_climate_report("Atlantis")
    assert weather_repo.calls == []


def test_no_geocoder(weather_repo, report_repo):
    """Without a geocoder, coordinates are required."""
    service = ClimateReportService(weather_repo, report_repo)
    with pytest.raises(LocationNotFoundError):
        service.get_climate_report("Bristol, UK")


def test_empty_weather_history(service, weather_repo, report_repo):
    """An empty history is an error, and nothing is stored."""
    weather_repo.records = []
    with pytest.raises(WeatherDataUnavailableError):
        service.get_climate_report("Bristol, UK")
    assert not report_repo.report_exists("bristol, uk")


def test_analyze_uses_dataset_location(service, make_dataset):
    """analyze falls back to the latitude of the dataset's location."""
    dataset = make_dataset(
        date(2023, 1, 1),
        date(2023, 12, 31),
        temp_mean=lambda d: 2.0 if d.month == 1 else 15.0,
        precipitation=2.2,
    )
    located = WeatherDataset.from_records(dataset.records, location=Location("North", 55.0, 0.0))

    assert service.analyze(dataset).koppen_class.code == "Csa"
    assert service.analyze(located).koppen_class.code == "Cfc"


def test_is_report_stale():
    """Reports go stale after more than 180 days."""
    now = datetime(2024, 7, 1)
    assert not is_report_stale(now - timedelta(days=180), now=now)
    assert is_report_stale(now - timedelta(days=181), now=now)
    assert is_report_stale(now - timedelta(days=10), max_age_days=7, now=now)


def test_history_window():
    """The window spans whole years and survives leap days."""
    assert history_window(20, date(2024, 6, 15)) == (date(2004, 6, 15), date(2024, 6, 15))
    assert history_window(1, date(2024, 2, 29)) == (date(2023, 2, 28), date(2024, 2, 29))
