"""Weather dataset entity."""

from dataclasses import dataclass, field
from functools import cached_property
from typing import Iterable, Iterator, List, Optional, Tuple

import pandas as pd

from .daily_record import DailyRecord
from .location import Location

NUMERIC_COLUMNS = [
    "temp_min",
    "temp_max",
    "temp_mean",
    "precipitation",
    "humidity",
    "wind_speed",
    "cloud_cover",
]
FRAME_COLUMNS = ["date"] + NUMERIC_COLUMNS


@dataclass(frozen=True)
class WeatherDataset:
    """Daily weather records for exactly one location.

    The dataset is read-only. Analyzers work on :meth:`to_frame`, which is
    sorted on every column so that the input record order never changes a
    result.
    """

    records: Tuple[DailyRecord, ...] = ()
    location: Optional[Location] = field(default=None, compare=False)

    @classmethod
    def from_records(
        cls, records: Iterable[DailyRecord], location: Optional[Location] = None
    ) -> "WeatherDataset":
        return cls(records=tuple(records), location=location)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[DailyRecord]:
        return iter(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def years(self) -> List[int]:
        """Sorted distinct calendar years present in the dataset."""
        return sorted({record.date.year for record in self.records})

    @cached_property
    def _frame(self) -> pd.DataFrame:
        df = pd.DataFrame(
            [record.to_dict() for record in self.records], columns=FRAME_COLUMNS
        )
        df["date"] = pd.to_datetime(df["date"])
        df[NUMERIC_COLUMNS] = df[NUMERIC_COLUMNS].astype(float)
        df = df.sort_values(FRAME_COLUMNS, kind="mergesort", na_position="last")
        df = df.reset_index(drop=True)

        df["year"] = df["date"].dt.year
        df["month"] = df["date"].dt.month
        df["day"] = df["date"].dt.day
        return df

    def to_frame(self) -> pd.DataFrame:
        """
        Get the records as a DataFrame.

        Returns:
            DataFrame with a ``date`` column, the numeric observation columns
            (missing values as NaN) and derived ``year``, ``month``, ``day``
            columns
        """
        return self._frame.copy()
