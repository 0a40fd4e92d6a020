"""Service orchestrating weather retrieval, climate analysis and report storage."""

import logging
from datetime import date, datetime
from typing import Any, Dict, Optional

from ...domain.entities.climate_report import ClimateReport, StoredClimateReport
from ...domain.entities.location import Location
from ...domain.entities.weather_dataset import WeatherDataset
from ...domain.exceptions import LocationNotFoundError, WeatherDataUnavailableError
from ...domain.repositories.climate_report_repository import ClimateReportRepository
from ...domain.repositories.geocoding_repository import GeocodingRepository
from ...domain.repositories.weather_repository import WeatherRepository
from ...domain.use_cases.assemble_climate_report import AssembleClimateReportUseCase
from ...domain.use_cases.collect_weather_data import (
    CollectWeatherDataUseCase,
    history_window,
)

logger = logging.getLogger(__name__)


def is_report_stale(
    last_updated: datetime, max_age_days: int = 180, now: Optional[datetime] = None
) -> bool:
    """Reports built from multi-year averages are refreshed every six months."""
    now = now or datetime.now()
    return (now - last_updated).days > max_age_days


class ClimateReportService:
    """Returns stored climate reports, recomputing them when missing or stale."""

    def __init__(
        self,
        weather_repo: WeatherRepository,
        report_repo: ClimateReportRepository,
        geocoder: Optional[GeocodingRepository] = None,
        thresholds: Optional[Dict[str, Any]] = None,
        history_years: int = 20,
        stale_after_days: int = 180,
        data_source: str = "open-meteo",
    ):
        self.weather_repo = weather_repo
        self.report_repo = report_repo
        self.geocoder = geocoder
        self.history_years = history_years
        self.stale_after_days = stale_after_days
        self.data_source = data_source

        self.collect_weather_uc = CollectWeatherDataUseCase(weather_repo)
        self.assemble_report_uc = AssembleClimateReportUseCase(thresholds)

    def resolve_location(
        self,
        name: str,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> Location:
        """Use the given coordinates, or geocode the name when they are missing."""
        location = Location(name=name, latitude=latitude, longitude=longitude)
        if location.has_coordinates:
            return location
        if self.geocoder is None:
            raise LocationNotFoundError(f"No coordinates for {name!r} and no geocoder configured")

        resolved = self.geocoder.geocode(name)
        if resolved is None or not resolved.has_coordinates:
            raise LocationNotFoundError(f"Could not geocode {name!r}")
        return resolved

    def analyze(self, dataset: WeatherDataset, latitude: Optional[float] = None) -> ClimateReport:
        """Compute a report for an already loaded dataset."""
        if latitude is None and dataset.location is not None:
            latitude = dataset.location.latitude
        return self.assemble_report_uc.execute(dataset, latitude)

    def refresh_report(
        self, location: Location, end_date: Optional[date] = None
    ) -> StoredClimateReport:
        """Fetch the weather history for a location, compute and store its report."""
        start, end = history_window(self.history_years, end_date)
        dataset = self.collect_weather_uc.execute(location, start, end)
        if dataset.is_empty:
            raise WeatherDataUnavailableError(
                f"No weather data for {location} from {start} to {end}"
            )

        stored = StoredClimateReport(
            location=location,
            report=self.analyze(dataset, location.latitude),
            last_updated=datetime.now(),
            data_source=self.data_source,
        )
        path = self.report_repo.save_report(stored)
        logger.info(f"Climate report for {location} saved: {path}")
        return stored

    def get_climate_report(
        self,
        location_name: str,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        force_refresh: bool = False,
    ) -> StoredClimateReport:
        """
        Get the climate report for a location.

        Args:
            location_name: Place name, also the storage key
            latitude: Optional latitude, skips geocoding together with longitude
            longitude: Optional longitude
            force_refresh: Recompute even if a fresh report is stored

        Returns:
            The stored or newly computed report
        """
        key = Location(name=location_name).key
        stored = None if force_refresh else self.report_repo.get_report(key)

        if stored is not None and not is_report_stale(stored.last_updated, self.stale_after_days):
            logger.info(f"Using stored climate report for {location_name} ({stored.age_days()} days old)")
            return stored

        if stored is not None:
            logger.info(f"Stored climate report for {location_name} is stale, refreshing")

        location = self.resolve_location(location_name, latitude, longitude)
        return self.refresh_report(location)
