"""Tests for CalculateHeatZoneUseCase."""

from datetime import date, timedelta

from src.domain.entities.weather_dataset import WeatherDataset
from src.domain.use_cases.calculate_heat_zone import CalculateHeatZoneUseCase


def test_fifty_hot_days_is_zone_six(make_dataset):
    """50 days above 30°C in one year gives heat zone 6."""
    first_hot = date(2023, 1, 1)
    last_hot = first_hot + timedelta(days=49)
    dataset = make_dataset(
        date(2023, 1, 1),
        date(2023, 12, 31),
        temp_max=lambda d: 35.0 if d <= last_hot else 20.0,
    )
    use_case = CalculateHeatZoneUseCase()
    assert use_case.hot_days_per_year(dataset) == 50
    assert use_case.execute(dataset) == 6


def test_hot_days_are_averaged_over_years(make_dataset):
    """100 hot days over two years is 50 per year."""
    dataset = make_dataset(
        date(2021, 1, 1),
        date(2022, 12, 31),
        temp_max=lambda d: 32.0 if d.month == 7 or (d.month == 8 and d.day <= 19) else 25.0,
    )
    use_case = CalculateHeatZoneUseCase()
    assert use_case.hot_days_per_year(dataset) == 50
    assert use_case.execute(dataset) == 6


def test_threshold_is_exclusive(make_dataset):
    """Exactly 30°C is not a hot day."""
    dataset = make_dataset(date(2023, 1, 1), date(2023, 12, 31), temp_max=30.0)
    assert CalculateHeatZoneUseCase().execute(dataset) == 1


def test_short_dataset_is_not_scaled_up(make_dataset):
    """Less than a year of data counts as one year."""
    dataset = make_dataset(date(2023, 7, 1), date(2023, 7, 31), temp_max=35.0)
    assert CalculateHeatZoneUseCase().hot_days_per_year(dataset) == 31


def test_empty_dataset_is_zone_one():
    """No records means no hot days."""
    assert CalculateHeatZoneUseCase().execute(WeatherDataset()) == 1


def test_zone_for():
    """Test band edges and the open upper end."""
    use_case = CalculateHeatZoneUseCase()
    assert use_case.zone_for(0) == 1
    assert use_case.zone_for(0.99) == 1
    assert use_case.zone_for(1) == 2
    assert use_case.zone_for(45) == 6
    assert use_case.zone_for(209.9) == 11
    assert use_case.zone_for(210) == 12
    assert use_case.zone_for(400) == 12
