"""Formatting of uncertain dates into dotted and ISO text.

Both formatters are total. Ranges that match a canonical shape (single day,
whole year, whole month) are written with ``xx`` placeholders; any other
range is written as two full dates joined by " - ". The parser cannot read
that span form back: spans are only reachable through
``UncertainDate.of_range``.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import TYPE_CHECKING

from uncertain_date.precision import Precision

if TYPE_CHECKING:
    from uncertain_date.uncertain_date import UncertainDate


RANGE_SEPARATOR = " - "


class DateStyle(Enum):
    """Available text conventions."""
    DOTTED = "dotted"  # dd.MM.yyyy
    ISO = "iso"        # yyyy-MM-dd


def _dotted_day(d: date) -> str:
    return f"{d.day:02d}.{d.month:02d}.{d.year:04d}"


def _iso_day(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def format_dotted(value: UncertainDate) -> str:
    """Format as ``dd.MM.yyyy``, e.g. ``xx.08.2017`` or ``10.08.2017 - 31.08.2017``."""
    precision = value.precision
    if precision is Precision.EMPTY:
        return "xx.xx.xxxx"
    start = value.start
    if precision is Precision.FULL:
        return _dotted_day(start)
    if precision is Precision.YEAR:
        return f"xx.xx.{start.year:04d}"
    if precision is Precision.YEAR_MONTH:
        return f"xx.{start.month:02d}.{start.year:04d}"
    return f"{_dotted_day(start)}{RANGE_SEPARATOR}{_dotted_day(value.end)}"


def format_iso(value: UncertainDate) -> str:
    """Format as ``yyyy-MM-dd``, e.g. ``2017-08-xx`` or ``2017-08-10 - 2017-08-31``."""
    precision = value.precision
    if precision is Precision.EMPTY:
        return "xxxx-xx-xx"
    start = value.start
    if precision is Precision.FULL:
        return _iso_day(start)
    if precision is Precision.YEAR:
        return f"{start.year:04d}-xx-xx"
    if precision is Precision.YEAR_MONTH:
        return f"{start.year:04d}-{start.month:02d}-xx"
    return f"{_iso_day(start)}{RANGE_SEPARATOR}{_iso_day(value.end)}"


def format_date(value: UncertainDate, style: DateStyle | str | None = None) -> str:
    """Format in the given style, or the configured default when style is None.

    Raises:
        ValueError: If style is a string that names no DateStyle
    """
    if style is None:
        # Lazy import to avoid circular dependency
        from uncertain_date.config import load_format_config

        style = load_format_config().default_style
    elif isinstance(style, str):
        style = DateStyle(style.strip().lower())

    if style is DateStyle.ISO:
        return format_iso(value)
    return format_dotted(value)
