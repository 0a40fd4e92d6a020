"""Climate report repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from ..entities.climate_report import StoredClimateReport


class ClimateReportRepository(ABC):
    """Abstract repository for climate report persistence."""

    @abstractmethod
    def save_report(self, stored: StoredClimateReport) -> str:
        """
        Save a computed report.

        Args:
            stored: Report with its location and computation time

        Returns:
            Path or identifier where the report was saved
        """
        pass

    @abstractmethod
    def get_report(self, location_key: str) -> Optional[StoredClimateReport]:
        """
        Load the stored report for a location.

        Args:
            location_key: Normalized location key (see ``Location.key``)

        Returns:
            The stored report, or None if there is none
        """
        pass

    @abstractmethod
    def report_exists(self, location_key: str) -> bool:
        """
        Check if a report exists.

        Args:
            location_key: Normalized location key

        Returns:
            True if a report exists, False otherwise
        """
        pass
