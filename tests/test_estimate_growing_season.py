"""Tests for EstimateGrowingSeasonUseCase."""

from datetime import date

from src.domain.entities.weather_dataset import WeatherDataset
from src.domain.use_cases.estimate_growing_season import EstimateGrowingSeasonUseCase


def test_year_round_season(make_dataset):
    """Every day above 5°C gives the whole representative year."""
    dataset = make_dataset(date(2023, 1, 1), date(2023, 12, 31), temp_min=12.0)
    result = EstimateGrowingSeasonUseCase().execute(dataset)
    assert result.start == date(2024, 1, 1)
    assert result.end == date(2024, 12, 31)
    assert result.length_days == 365


def test_few_cool_days_keep_year_round_season(make_dataset):
    """Ten cool days out of 365 stay above the 95% ratio."""
    dataset = make_dataset(
        date(2023, 1, 1),
        date(2023, 12, 31),
        temp_min=lambda d: 3.0 if d.month == 1 and d.day <= 10 else 12.0,
    )
    result = EstimateGrowingSeasonUseCase().execute(dataset)
    assert result.start == date(2024, 1, 1)
    assert result.length_days == 365


def test_no_growing_days(make_dataset):
    """Days at exactly 5°C do not count."""
    dataset = make_dataset(date(2023, 1, 1), date(2023, 12, 31), temp_min=5.0)
    result = EstimateGrowingSeasonUseCase().execute(dataset)
    assert result.start is None
    assert result.end is None
    assert result.length_days == 0


def test_empty_dataset():
    """An empty dataset has no season."""
    result = EstimateGrowingSeasonUseCase().execute(WeatherDataset())
    assert (result.start, result.end, result.length_days) == (None, None, 0)


def test_seasonal_window(make_dataset):
    """First and last growing days are averaged per component across years."""
    windows = {
        2021: (date(2021, 4, 1), date(2021, 10, 31)),
        2022: (date(2022, 4, 11), date(2022, 10, 21)),
    }

    def temp_min(d):
        start, end = windows[d.year]
        return 10.0 if start <= d <= end else 0.0

    dataset = make_dataset(date(2021, 1, 1), date(2022, 12, 31), temp_min=temp_min)
    result = EstimateGrowingSeasonUseCase().execute(dataset)

    assert result.start == date(2024, 4, 6)
    assert result.end == date(2024, 10, 26)
    # 214 and 194 growing days
    assert result.length_days == 204
