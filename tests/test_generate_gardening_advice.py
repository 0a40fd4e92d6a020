"""Tests for GenerateGardeningAdviceUseCase and FindColdestMinimumUseCase."""

from datetime import date

from src.domain.entities.daily_record import DailyRecord
from src.domain.entities.weather_dataset import WeatherDataset
from src.domain.use_cases.classify_hardiness_zones import ClassifyHardinessZonesUseCase
from src.domain.use_cases.find_coldest_minimum import FindColdestMinimumUseCase
from src.domain.use_cases.generate_gardening_advice import (
    COLD_CLIMATE_ADVICE,
    DRY_ADVICE,
    FROST_ADVICE,
    GenerateGardeningAdviceUseCase,
    HEAT_ADVICE,
    WET_ADVICE,
)


def test_cold_wet_frosty_climate(make_dataset):
    """Test advice for a cold, wet climate with frequent frost."""
    dataset = make_dataset(
        date(2023, 1, 1), date(2023, 12, 31), temp_min=-25.0, temp_max=5.0, precipitation=4.0
    )
    zones = ClassifyHardinessZonesUseCase().execute(-25.0)
    advice = GenerateGardeningAdviceUseCase().execute(dataset, zones)

    assert advice.startswith(COLD_CLIMATE_ADVICE)
    assert WET_ADVICE in advice
    assert FROST_ADVICE.format(frost_days=365) in advice
    assert DRY_ADVICE not in advice


def test_hot_dry_climate(make_dataset):
    """Hot days are counted per year, 30°C included."""
    dataset = make_dataset(
        date(2021, 1, 1),
        date(2022, 12, 31),
        temp_min=15.0,
        temp_max=lambda d: 30.0 if d.month in (6, 7, 8) else 24.0,
        precipitation=0.5,
    )
    zones = ClassifyHardinessZonesUseCase().execute(15.0)
    advice = GenerateGardeningAdviceUseCase().execute(dataset, zones)

    assert DRY_ADVICE in advice
    assert HEAT_ADVICE.format(hot_days=92) in advice
    assert "Frequent frost" not in advice


def test_coldest_minimum():
    """The absolute minimum ignores missing values."""
    dataset = WeatherDataset.from_records(
        [
            DailyRecord(date=date(2023, 1, 1), temp_min=-3.5),
            DailyRecord(date=date(2023, 1, 2)),
            DailyRecord(date=date(2023, 1, 3), temp_min=-7.25),
        ]
    )
    assert FindColdestMinimumUseCase().execute(dataset) == -7.25


def test_coldest_minimum_without_data():
    """No minimum temperatures falls back to 0°C."""
    dataset = WeatherDataset.from_records([DailyRecord(date=date(2023, 1, 1), temp_max=4.0)])
    assert FindColdestMinimumUseCase().execute(dataset) == 0.0
    assert FindColdestMinimumUseCase().execute(WeatherDataset()) == 0.0
