"""Time-key codec.

Series are keyed by fixed-width digit strings whose lexicographic order is
chronological order:

    monthly  YYYYMM     e.g. ``202403``
    daily    YYYYMMDD   e.g. ``20240315``

All conversions use local calendar fields. Range helpers anchor on the last
*complete* month so an in-progress month never enters a series.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date

from spurious_correlations.schemas import Granularity

MIN_MONTHS_BACK = 6
MAX_MONTHS_BACK = 120

MONTH_KEY_LENGTH = 6
DAY_KEY_LENGTH = 8


@dataclass(frozen=True)
class KeyRange:
    """Inclusive start/end keys (8 digits) for APIs that take key bounds."""

    start: str
    end: str


@dataclass(frozen=True)
class DateRange:
    """Inclusive start/end dates for APIs that take calendar dates."""

    start: date
    end: date


def month_key(d: date) -> str:
    """``date(2024, 3, 15)`` -> ``"202403"``."""
    return f"{d.year:04d}{d.month:02d}"


def day_key(d: date) -> str:
    """``date(2024, 3, 15)`` -> ``"20240315"``."""
    return f"{d.year:04d}{d.month:02d}{d.day:02d}"


def key_length(granularity: Granularity) -> int:
    return DAY_KEY_LENGTH if granularity == Granularity.DAILY else MONTH_KEY_LENGTH


def key_from_iso(text: str, granularity: Granularity) -> str:
    """``"2024-03-15"`` -> ``"20240315"`` (daily) or ``"202403"`` (monthly)."""
    return text.replace("-", "")[: key_length(granularity)]


def month_label(key: str) -> str:
    """``"202403"`` -> ``"2024-03"``."""
    return f"{key[:4]}-{key[4:6]}"


def display_label(key: str, granularity: Granularity) -> str:
    """Axis label for a key: ``YYYY-MM`` for monthly, the raw key for daily."""
    return month_label(key) if granularity == Granularity.MONTHLY else key


def clamp_months_back(months_back: int) -> int:
    """Clamp a lookback to ``[MIN_MONTHS_BACK, MAX_MONTHS_BACK]``."""
    return max(MIN_MONTHS_BACK, min(MAX_MONTHS_BACK, months_back))


def add_months(d: date, delta: int) -> date:
    """Shift by whole calendar months, clamping the day to the target month."""
    index = d.year * 12 + (d.month - 1) + delta
    year, month = divmod(index, 12)
    month += 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def last_full_month(today: date | None = None) -> date:
    """First day of the month before ``today``'s month."""
    today = today or date.today()
    return add_months(today.replace(day=1), -1)


def month_range(
    months_back: int,
    granularity: Granularity,
    today: date | None = None,
) -> KeyRange:
    """
    Key bounds covering ``months_back`` months ending at the last full month.

    Monthly bounds are forced to day 1 and rendered ``YYYYMM01``; daily bounds
    keep the anchor's day-of-month. The caller clamps ``months_back``.
    """
    end = last_full_month(today)
    start = add_months(end, -months_back + 1)
    if granularity == Granularity.MONTHLY:
        start = start.replace(day=1)
        end = end.replace(day=1)
    return KeyRange(start=day_key(start), end=day_key(end))


def range_dates(months_back: int, today: date | None = None) -> DateRange:
    """First day of the start month through the last day of the last full month."""
    end_month = last_full_month(today)
    start = add_months(end_month, -months_back + 1).replace(day=1)
    end = end_month.replace(day=calendar.monthrange(end_month.year, end_month.month)[1])
    return DateRange(start=start, end=end)
