"""CLI interface for the garden climate engine."""

import argparse
import json
import logging
import sys

from ...application.services.climate_report_service import ClimateReportService
from ...domain.entities.climate_report import ClimateReport
from ...domain.entities.weather_dataset import WeatherDataset
from ...domain.exceptions import ClimateDataError
from ...domain.use_cases.classify_hardiness_zones import ClassifyHardinessZonesUseCase
from ...domain.use_cases.assemble_climate_report import compute_climate_report
from ...infrastructure.repositories.file_climate_report_repository import (
    FileClimateReportRepository,
)
from ...infrastructure.repositories.file_weather_repository import FileWeatherRepository
from ...infrastructure.repositories.nominatim_geocoding_repository import (
    NominatimGeocodingRepository,
)
from ...infrastructure.repositories.open_meteo_weather_repository import (
    OpenMeteoWeatherRepository,
)

from config.settings import (
    CLIMATE_THRESHOLDS,
    GEOCODER_SETTINGS,
    LOG_FORMAT,
    LOG_LEVEL,
    OPEN_METEO_SETTINGS,
    REPORT_DIR,
    REPORT_SETTINGS,
    WEATHER_DATA_FILE,
)

logger = logging.getLogger(__name__)


def build_service(report_dir: str = str(REPORT_DIR)) -> ClimateReportService:
    """Wire the service with the Open-Meteo, Nominatim and file adapters."""
    return ClimateReportService(
        weather_repo=OpenMeteoWeatherRepository(
            archive_url=OPEN_METEO_SETTINGS["archive_url"],
            timeout=OPEN_METEO_SETTINGS["timeout"],
            timezone=OPEN_METEO_SETTINGS["timezone"],
        ),
        report_repo=FileClimateReportRepository(report_dir),
        geocoder=NominatimGeocodingRepository(**GEOCODER_SETTINGS),
        thresholds=CLIMATE_THRESHOLDS,
        history_years=REPORT_SETTINGS["history_years"],
        stale_after_days=REPORT_SETTINGS["stale_after_days"],
    )


def print_report(report: ClimateReport, title: str) -> None:
    print("\n" + "=" * 60)
    print(f" CLIMATE REPORT: {title} ")
    print("=" * 60)
    print(f" USDA zone:        {report.usda_zone} ({report.hardiness_category.value})")
    print(f" RHS rating:       {report.rhs_zone} - {report.rhs_description}")
    print(f" Heat zone:        {report.heat_zone}")
    print(f" Köppen:           {report.koppen_class or 'unknown'}")
    print(f" Coldest minimum:  {report.temperature_range}")
    print(f" Annual rainfall:  {report.annual_rainfall} mm")
    print(f" Wettest month:    {report.wettest_month} ({report.wettest_month_precip} mm)")
    print(f" Driest month:     {report.driest_month} ({report.driest_month_precip} mm)")

    frost = report.frost_dates
    if frost.frost_free:
        print(" Frost dates:      frost-free")
    else:
        print(f" Frost dates:      last spring {frost.last_spring}, first fall {frost.first_fall}")

    season = report.growing_season
    print(f" Growing season:   {season.start} to {season.end} ({season.length_days} days)")
    print("-" * 60)
    print(f" Data: {report.data_range.label} ({report.data_range.total_days} days)")
    if report.insufficient_data:
        print(" WARNING: no minimum temperatures in data, zones are not meaningful")
    if report.gardening_advice:
        print("\nAdvice:")
        print(report.gardening_advice)
    print("=" * 60)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Garden Climate Engine")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === analyze: report from a local CSV/XLSX file ===
    analyze_parser = subparsers.add_parser(
        "analyze", help="Compute a climate report from a daily weather file"
    )
    analyze_parser.add_argument(
        "data_file",
        type=str,
        nargs="?",
        default=str(WEATHER_DATA_FILE),
        help="CSV or XLSX with one row per day",
    )
    analyze_parser.add_argument("--latitude", type=float, default=None, help="Latitude in degrees")
    analyze_parser.add_argument(
        "--location", type=str, default=None, help="Location to analyze in a multi-location file"
    )

    # === report: fetch history for a location ===
    report_parser = subparsers.add_parser(
        "report", help="Get the climate report for a location (fetches history if needed)"
    )
    report_parser.add_argument("location", type=str, help="e.g. 'Bristol, UK'")
    report_parser.add_argument("--latitude", type=float, default=None)
    report_parser.add_argument("--longitude", type=float, default=None)
    report_parser.add_argument("--refresh", action="store_true", help="Ignore the stored report")
    report_parser.add_argument("--report-dir", type=str, default=str(REPORT_DIR))

    # === zones: classify a single temperature ===
    zones_parser = subparsers.add_parser("zones", help="Classify a coldest-minimum temperature")
    zones_parser.add_argument("temperature", type=float, help="Coldest minimum in Celsius")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVEL,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    if args.command == "zones":
        zones = ClassifyHardinessZonesUseCase().execute(args.temperature)
        if args.json:
            print(
                json.dumps(
                    {
                        "usda_zone": zones.usda_zone,
                        "rhs_zone": zones.rhs_zone,
                        "rhs_description": zones.rhs_description,
                        "hardiness_category": zones.hardiness_category.value,
                    },
                    ensure_ascii=False,
                )
            )
        else:
            print(f"USDA {zones.usda_zone} | RHS {zones.rhs_zone} | {zones.hardiness_category.value}")
            print(zones.rhs_description)
        return 0

    try:
        if args.command == "analyze":
            records = FileWeatherRepository(args.data_file).get_all_records(args.location)
            report = compute_climate_report(
                WeatherDataset.from_records(records), args.latitude, CLIMATE_THRESHOLDS
            )
            title = args.location or args.data_file
        else:
            service = build_service(args.report_dir)
            stored = service.get_climate_report(
                args.location,
                latitude=args.latitude,
                longitude=args.longitude,
                force_refresh=args.refresh,
            )
            report = stored.report
            title = stored.location.name
    except (ClimateDataError, FileNotFoundError, ValueError) as e:
        logger.error(f"Climate report failed: {e}", exc_info=True)
        return 1

    if args.json:
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    else:
        print_report(report, title)
    return 0


if __name__ == "__main__":
    sys.exit(main())
