"""Repository interfaces."""

from .weather_repository import WeatherRepository
from .geocoding_repository import GeocodingRepository
from .climate_report_repository import ClimateReportRepository

__all__ = [
    "WeatherRepository",
    "GeocodingRepository",
    "ClimateReportRepository",
]
