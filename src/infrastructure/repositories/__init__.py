"""Concrete repository implementations."""

from .file_weather_repository import FileWeatherRepository
from .open_meteo_weather_repository import OpenMeteoWeatherRepository
from .nominatim_geocoding_repository import NominatimGeocodingRepository
from .file_climate_report_repository import FileClimateReportRepository

__all__ = [
    "FileWeatherRepository",
    "OpenMeteoWeatherRepository",
    "NominatimGeocodingRepository",
    "FileClimateReportRepository",
]
