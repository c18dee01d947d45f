"""The UncertainDate value type.

An uncertain date is stored as an optional inclusive range of calendar dates.
What is known about the date (year, month, day) is never stored separately;
it is read off the shape of the range:

    empty            no bounds
    year only        [Jan 1, Dec 31] of the year
    year and month   [first, last] day of the month
    fully known      start == end
    span             any other range inside a single year
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from uncertain_date.errors import CalendarError, NullArgumentError, RangeError
from uncertain_date.precision import Precision, classify, last_day_of_month


def _calendar_date(year: int, month: int, day: int) -> date:
    try:
        return date(year, month, day)
    except ValueError as e:
        raise CalendarError(f"Invalid date {year:04d}-{month:02d}-{day:02d}: {e}") from e


def _check_bound(name: str, value: Any) -> None:
    if value is None:
        raise NullArgumentError(f"{name} must not be None")
    # datetime is a date subclass but carries a time of day
    if not isinstance(value, date) or isinstance(value, datetime):
        raise TypeError(f"{name} must be a datetime.date, got {type(value).__name__}")


@dataclass(frozen=True)
class UncertainDate:
    """A date whose year, month or day may be unknown.

    Instances are immutable and compare by their resolved range only, so
    ``UncertainDate.of_year(2017)`` equals
    ``UncertainDate.of_range(date(2017, 1, 1), date(2017, 12, 31))``.

    Attributes:
        start: First day of the range (inclusive), None if nothing is known
        end: Last day of the range (inclusive), None if nothing is known
    """
    start: date | None = None
    end: date | None = None

    def __post_init__(self) -> None:
        if (self.start is None) != (self.end is None):
            raise NullArgumentError("start and end must both be set or both be None")
        if self.start is None:
            return
        _check_bound("start", self.start)
        _check_bound("end", self.end)
        if self.end < self.start:
            raise RangeError(f"The start {self.start} lies after the end {self.end}.")
        if self.start.year != self.end.year:
            raise RangeError(
                f"The start {self.start} and the end {self.end} must be within the same year."
            )

    # Construction

    @classmethod
    def empty(cls) -> UncertainDate:
        """Create an uncertain date where nothing is known."""
        return cls()

    @classmethod
    def of_year(cls, year: int) -> UncertainDate:
        """Create an uncertain date where only the year is known.

        Raises:
            CalendarError: If the year is outside 1..9999
        """
        start = _calendar_date(year, 1, 1)
        return cls(start, date(year, 12, 31))

    @classmethod
    def of_year_month(cls, year: int, month: int) -> UncertainDate:
        """Create an uncertain date where the year and month are known.

        Raises:
            CalendarError: If the year or month is invalid
        """
        start = _calendar_date(year, month, 1)
        return cls(start, date(year, month, last_day_of_month(year, month)))

    @classmethod
    def of_year_month_day(cls, year: int, month: int, day: int) -> UncertainDate:
        """Create a fully known date.

        Raises:
            CalendarError: If the combination is not a valid calendar date
        """
        d = _calendar_date(year, month, day)
        return cls(d, d)

    @classmethod
    def of_range(cls, start_inclusive: date, end_inclusive: date) -> UncertainDate:
        """Create an uncertain date from an explicit inclusive range.

        Args:
            start_inclusive: First possible day, not None
            end_inclusive: Last possible day, not None

        Raises:
            NullArgumentError: If either bound is None
            RangeError: If the end lies before the start, or the years differ
        """
        _check_bound("start_inclusive", start_inclusive)
        _check_bound("end_inclusive", end_inclusive)
        return cls(start_inclusive, end_inclusive)

    @classmethod
    def parse(cls, text: str) -> UncertainDate:
        """Parse text in dotted (``xx.08.2017``) or ISO (``2017-08-xx``) form."""
        # Lazy import to avoid circular dependency
        from uncertain_date.parsing.date_parser import UncertainDateParser

        return UncertainDateParser.parse(text)

    @classmethod
    def from_dict(cls, data: dict) -> UncertainDate:
        """Build an uncertain date from its record form (see serialization)."""
        from uncertain_date.serialization import from_dict

        return from_dict(data)

    # Predicates

    def is_empty(self) -> bool:
        """True if nothing about the date is known."""
        return self.start is None and self.end is None

    def is_uncertain(self) -> bool:
        """True if at least one of year, month or day is unknown."""
        return self.start is None or self.start != self.end

    # Accessors

    @property
    def precision(self) -> Precision:
        return classify(self.start, self.end)

    @property
    def year(self) -> int | None:
        """The year, known for every non-empty value."""
        if self.start is None:
            return None
        return self.start.year

    @property
    def month(self) -> int | None:
        """The month, if start and end fall within the same month."""
        if self.start is None or self.start.month != self.end.month:
            return None
        return self.start.month

    @property
    def day(self) -> int | None:
        """The day of month, only if the date is fully known."""
        if self.is_uncertain():
            return None
        return self.start.day

    @property
    def length_days(self) -> int | None:
        """Number of days the range covers, both ends included."""
        if self.start is None:
            return None
        return (self.end - self.start).days + 1

    def to_date(self) -> date | None:
        """The exact date, or None if the date is uncertain."""
        if self.is_uncertain():
            return None
        return self.start

    # Text and record forms

    def format(self) -> str:
        """Format as ``dd.MM.yyyy``, with ``xx`` for unknown parts."""
        from uncertain_date.formatting import format_dotted

        return format_dotted(self)

    def format_iso(self) -> str:
        """Format as ``yyyy-MM-dd``, with ``xx`` for unknown parts."""
        from uncertain_date.formatting import format_iso

        return format_iso(self)

    def to_dict(self) -> dict[str, Any]:
        from uncertain_date.serialization import to_dict

        return to_dict(self)

    def __str__(self) -> str:
        return self.format()
