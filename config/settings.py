"""Application settings and configuration."""

import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Data paths
DATA_DIR = Path(os.getenv("CLIMATE_DATA_DIR", str(BASE_DIR / "data")))
WEATHER_DATA_FILE = DATA_DIR / "daily_weather.csv"

# Stored climate reports
REPORT_DIR = Path(os.getenv("CLIMATE_REPORT_DIR", str(BASE_DIR / "reports")))

# Classification thresholds
CLIMATE_THRESHOLDS = {
    "frost_temp": 0.0,  # tempMin <= frost_temp is a frost day
    "growing_temp": 5.0,  # tempMin > growing_temp is a growing day
    "hot_day_temp": 30.0,  # tempMax > hot_day_temp is a hot day
    "full_season_ratio": 0.95,  # share of growing days for a year-round season
    "representative_year": 2024,  # year used to express averaged dates
}

# Report refresh policy
REPORT_SETTINGS = {
    "history_years": 20,
    "stale_after_days": 180,
}

# Historical weather provider
OPEN_METEO_SETTINGS = {
    "archive_url": os.getenv(
        "OPEN_METEO_ARCHIVE_URL", "https://archive-api.open-meteo.com/v1/archive"
    ),
    "timeout": float(os.getenv("OPEN_METEO_TIMEOUT", "60")),
    "timezone": "auto",
}

# Geocoding
GEOCODER_SETTINGS = {
    "user_agent": os.getenv("GEOCODER_USER_AGENT", "garden-climate-engine"),
    "timeout": 10,
}

# API settings
API_SETTINGS = {
    "title": "Garden Climate API",
    "description": "Hardiness zones, heat zones and seasonal climate metrics for garden planning",
    "version": "1.0.0",
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
