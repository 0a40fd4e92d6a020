"""File-based climate report repository implementation."""

import json
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Optional

from ...domain.entities.climate_report import ClimateReport, StoredClimateReport
from ...domain.entities.location import Location
from ...domain.repositories.climate_report_repository import ClimateReportRepository

logger = logging.getLogger(__name__)


class FileClimateReportRepository(ClimateReportRepository):
    """Repository for saving/loading climate reports as JSON files."""

    def __init__(self, report_dir: str = "reports"):
        """
        Initialize repository.

        Args:
            report_dir: Directory to store reports
        """
        self.report_dir = Path(report_dir)
        self.report_dir.mkdir(parents=True, exist_ok=True)

    def _report_file(self, location_key: str) -> Path:
        slug = re.sub(r"[^a-z0-9]+", "_", location_key.lower()).strip("_") or "unnamed"
        return self.report_dir / f"climate_{slug}.json"

    def save_report(self, stored: StoredClimateReport) -> str:
        """Save report to file."""
        report_file = self._report_file(stored.location.key)
        logger.info(f"Saving climate report to {report_file}")

        payload = {
            "location": {
                "name": stored.location.name,
                "latitude": stored.location.latitude,
                "longitude": stored.location.longitude,
            },
            "last_updated": stored.last_updated.isoformat(),
            "data_source": stored.data_source,
            "report": stored.report.to_dict(),
        }
        with open(report_file, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)

        return str(report_file)

    def get_report(self, location_key: str) -> Optional[StoredClimateReport]:
        """Load report from file."""
        report_file = self._report_file(location_key)
        if not report_file.exists():
            return None

        logger.info(f"Loading climate report from {report_file}")
        with open(report_file, "r", encoding="utf-8") as f:
            payload = json.load(f)

        return StoredClimateReport(
            location=Location(**payload["location"]),
            report=ClimateReport.from_dict(payload["report"]),
            last_updated=datetime.fromisoformat(payload["last_updated"]),
            data_source=payload.get("data_source", "unknown"),
        )

    def report_exists(self, location_key: str) -> bool:
        """Check if report file exists."""
        return self._report_file(location_key).exists()
