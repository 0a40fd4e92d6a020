"""Application services."""

from .climate_report_service import ClimateReportService, is_report_stale

__all__ = ["ClimateReportService", "is_report_stale"]
