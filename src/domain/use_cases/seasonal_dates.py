"""Helpers for averaging calendar dates across years."""

import math
from datetime import date, timedelta
from typing import Optional

import pandas as pd


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def representative_date(month: int, day: int, year: int) -> date:
    """
    Build a date in ``year``, rolling an out-of-range day into the next month.

    Averaging month and day independently can yield e.g. September 31st,
    which becomes October 1st.

    Args:
        month: Calendar month (1-12)
        day: Day of month, may exceed the month's length
        year: Representative year

    Returns:
        The resulting date
    """
    return date(year, month, 1) + timedelta(days=day - 1)


def average_month_day(dates: pd.Series, year: int) -> Optional[date]:
    """
    Average the month and the day of a series of dates independently.

    Args:
        dates: Series of datetime64 values, one per year
        year: Representative year for the result

    Returns:
        The averaged date, or None if the series is empty
    """
    if dates.empty:
        return None
    month = round_half_up(dates.dt.month.mean())
    day = round_half_up(dates.dt.day.mean())
    return representative_date(month, day, year)
