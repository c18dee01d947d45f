"""Precision levels of an uncertain date, derived from the shape of its range."""

from __future__ import annotations

import calendar
from datetime import date
from enum import Enum


class Precision(Enum):
    """How much of a date is known."""
    EMPTY = "empty"            # Nothing known
    YEAR = "year"              # Year only
    YEAR_MONTH = "year_month"  # Year and month
    FULL = "full"              # Exact day
    SPAN = "span"              # Arbitrary range, no single precision


def last_day_of_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def is_whole_year(start: date, end: date) -> bool:
    """True if the range is exactly Jan 1 to Dec 31 of start's year."""
    return start == date(start.year, 1, 1) and end == date(start.year, 12, 31)


def is_whole_month(start: date, end: date) -> bool:
    """True if the range is exactly the first to the last day of start's month."""
    if start.day != 1:
        return False
    last = last_day_of_month(start.year, start.month)
    return end == date(start.year, start.month, last)


def classify(start: date | None, end: date | None) -> Precision:
    """Classify a range by shape.

    Single days are checked first, then whole years, then whole months, so
    the result matches the precedence the formatters use.
    """
    if start is None or end is None:
        return Precision.EMPTY
    if start == end:
        return Precision.FULL
    if is_whole_year(start, end):
        return Precision.YEAR
    if is_whole_month(start, end):
        return Precision.YEAR_MONTH
    return Precision.SPAN
