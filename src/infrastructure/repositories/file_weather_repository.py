"""File-based weather repository implementation."""

import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

import pandas as pd

from ...domain.entities.daily_record import DailyRecord
from ...domain.entities.location import Location
from ...domain.repositories.weather_repository import WeatherRepository

logger = logging.getLogger(__name__)

# Alternative column names, e.g. from Visual Crossing exports
COLUMN_ALIASES = {
    "datetime": "date",
    "tempmin": "temp_min",
    "tempmax": "temp_max",
    "temp": "temp_mean",
    "precip": "precipitation",
    "windspeed": "wind_speed",
    "cloudcover": "cloud_cover",
}

NUMERIC_COLUMNS = [
    "temp_min",
    "temp_max",
    "temp_mean",
    "precipitation",
    "humidity",
    "wind_speed",
    "cloud_cover",
]


def _optional_float(value) -> Optional[float]:
    return float(value) if pd.notna(value) else None


class FileWeatherRepository(WeatherRepository):
    """Repository for daily weather data stored in CSV or Excel files."""

    def __init__(self, data_file: str):
        """
        Initialize repository.

        Args:
            data_file: Path to an Excel/CSV file with one row per day. An
                optional ``location`` column holds several locations in one
                file.
        """
        self.data_file = Path(data_file)
        if not self.data_file.exists():
            raise FileNotFoundError(f"Weather data file not found: {data_file}")

    def _read_frame(self) -> pd.DataFrame:
        if self.data_file.suffix == ".xlsx":
            df = pd.read_excel(self.data_file, engine="openpyxl")
        else:
            df = pd.read_csv(self.data_file)

        df = df.rename(columns=lambda c: str(c).strip().lower())
        df = df.rename(columns=COLUMN_ALIASES)
        if "date" not in df.columns:
            raise ValueError(f"No date column in {self.data_file}")

        df["date"] = pd.to_datetime(df["date"])
        for col in NUMERIC_COLUMNS:
            if col not in df.columns:
                df[col] = float("nan")
            df[col] = pd.to_numeric(df[col], errors="coerce")
        return df

    def get_daily_records(
        self,
        location: Location,
        start_date: date,
        end_date: date,
    ) -> List[DailyRecord]:
        """Load daily records for a location from the file."""
        logger.info(
            f"Loading weather data from {self.data_file} "
            f"for {location} from {start_date} to {end_date}"
        )

        try:
            df = self._read_frame()
        except Exception as e:
            logger.error(f"Error loading weather data: {e}")
            raise

        mask = (df["date"] >= pd.to_datetime(start_date)) & (
            df["date"] <= pd.to_datetime(end_date)
        )
        if "location" in df.columns:
            mask &= df["location"].astype(str).str.lower() == location.name.lower()
        result = self._to_records(df[mask])
        logger.info(f"Loaded {len(result)} weather records")
        return result

    def get_all_records(self, location_name: Optional[str] = None) -> List[DailyRecord]:
        """
        Load every day of one location, whatever its dates.

        Args:
            location_name: Location to select when the file has a
                ``location`` column; may be omitted if it holds a single one

        Returns:
            List of DailyRecord entities
        """
        df = self._read_frame()
        if "location" in df.columns:
            names = df["location"].astype(str).str.lower()
            if location_name is not None:
                df = df[names == location_name.lower()]
            elif names.nunique() > 1:
                raise ValueError(
                    f"{self.data_file} holds {names.nunique()} locations, choose one of: "
                    f"{', '.join(sorted(df['location'].astype(str).unique()))}"
                )
        return self._to_records(df)

    @staticmethod
    def _to_records(df: pd.DataFrame) -> List[DailyRecord]:
        return [
            DailyRecord(
                date=row["date"].date(),
                **{col: _optional_float(row[col]) for col in NUMERIC_COLUMNS},
            )
            for _, row in df.iterrows()
        ]
