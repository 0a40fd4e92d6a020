"""Open-Meteo historical weather repository implementation."""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

import requests

from ...domain.entities.daily_record import DailyRecord
from ...domain.entities.location import Location
from ...domain.exceptions import WeatherDataUnavailableError
from ...domain.repositories.weather_repository import WeatherRepository

logger = logging.getLogger(__name__)

ARCHIVE_URL = "https://archive-api.open-meteo.com/v1/archive"

# Open-Meteo daily variable -> DailyRecord field
DAILY_VARIABLES = {
    "temperature_2m_min": "temp_min",
    "temperature_2m_max": "temp_max",
    "temperature_2m_mean": "temp_mean",
    "precipitation_sum": "precipitation",
    "relative_humidity_2m_mean": "humidity",
    "wind_speed_10m_mean": "wind_speed",
    "cloud_cover_mean": "cloud_cover",
}


def _value_at(values: List[Any], idx: int) -> Optional[float]:
    if idx >= len(values) or values[idx] is None:
        return None
    return float(values[idx])


class OpenMeteoWeatherRepository(WeatherRepository):
    """Repository for daily history from the Open-Meteo archive API."""

    def __init__(
        self,
        archive_url: str = ARCHIVE_URL,
        timeout: float = 60.0,
        timezone: str = "auto",
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize repository.

        Args:
            archive_url: Archive endpoint
            timeout: Request timeout in seconds
            timezone: Timezone used to cut days, ``auto`` for the location's own
            session: HTTP session, a new one is created if omitted
        """
        self.archive_url = archive_url
        self.timeout = timeout
        self.timezone = timezone
        self.session = session or requests.Session()

    def _request(self, params: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = self.session.get(self.archive_url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Open-Meteo request failed: {e}")
            raise WeatherDataUnavailableError(f"Open-Meteo request failed: {e}") from e

        if response.status_code == 429:
            raise WeatherDataUnavailableError(
                "Open-Meteo rate limit reached, please wait and try again"
            )
        if response.status_code != 200:
            logger.error(f"Open-Meteo error {response.status_code}: {response.text[:200]}")
            raise WeatherDataUnavailableError(f"Open-Meteo API error: {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise WeatherDataUnavailableError("Open-Meteo returned invalid JSON") from e

    @staticmethod
    def parse_daily(payload: Dict[str, Any]) -> List[DailyRecord]:
        """
        Convert an archive response into daily records.

        Args:
            payload: Decoded JSON response

        Returns:
            List of DailyRecord entities, one per day in ``daily.time``
        """
        daily = payload.get("daily")
        if not daily or "time" not in daily:
            raise WeatherDataUnavailableError("Open-Meteo response has no daily data")

        columns = {
            field: daily.get(variable) or [] for variable, field in DAILY_VARIABLES.items()
        }
        return [
            DailyRecord(
                date=date.fromisoformat(day),
                **{field: _value_at(values, idx) for field, values in columns.items()},
            )
            for idx, day in enumerate(daily["time"])
        ]

    def get_daily_records(
        self,
        location: Location,
        start_date: date,
        end_date: date,
    ) -> List[DailyRecord]:
        """Fetch daily records for a location from the archive API."""
        if not location.has_coordinates:
            raise ValueError(f"Location {location} has no coordinates")

        logger.info(
            f"Fetching Open-Meteo history for {location} "
            f"({location.latitude}, {location.longitude}) from {start_date} to {end_date}"
        )
        payload = self._request(
            {
                "latitude": location.latitude,
                "longitude": location.longitude,
                "start_date": start_date.isoformat(),
                "end_date": end_date.isoformat(),
                "daily": ",".join(DAILY_VARIABLES),
                "timezone": self.timezone,
            }
        )
        records = self.parse_daily(payload)
        logger.info(f"Fetched {len(records)} daily records")
        return records
