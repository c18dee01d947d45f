"""Abstract base class for uncertain date parsing strategies.

Each strategy recognizes one delimiter family. A family is described by a
fixed field layout and a table of allowed field shapes. A field is either a
placeholder (``xx``/``xxxx`` or ``00``/``0000``) or a number, and only the
shape combinations listed in the table are accepted.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from enum import Enum, auto

from uncertain_date.errors import CalendarError, FormatError
from uncertain_date.precision import Precision
from uncertain_date.uncertain_date import UncertainDate


logger = logging.getLogger(__name__)


class FieldShape(Enum):
    """What a single fixed-width field contains."""
    X = auto()       # xx / xxxx
    ZERO = auto()    # 00 / 0000
    NUMBER = auto()  # any other run of digits


Shape = tuple[FieldShape, FieldShape, FieldShape]

# Fields that must be numeric for each precision, in construction order
_KNOWN_FIELDS = {
    Precision.YEAR: ("year",),
    Precision.YEAR_MONTH: ("year", "month"),
    Precision.FULL: ("year", "month", "day"),
}

_CONSTRUCTORS = {
    1: UncertainDate.of_year,
    2: UncertainDate.of_year_month,
    3: UncertainDate.of_year_month_day,
}


def field_shape(token: str) -> FieldShape:
    if set(token) == {"x"}:
        return FieldShape.X
    if set(token) == {"0"}:
        return FieldShape.ZERO
    return FieldShape.NUMBER


class UncertainDateParserStrategy(ABC):
    """Interface for uncertain date parsing strategies.

    Subclasses set:
        family: Human readable name used in error messages
        field_order: Group names of the layout in text order
        shapes: Allowed (year, month, day) shapes mapped to the parsed precision
    """

    family: str
    field_order: tuple[str, str, str]
    shapes: dict[Shape, Precision]

    @abstractmethod
    def match_layout(self, text: str) -> re.Match | None:
        """Match text against the family's fixed layout.

        The match must expose the groups "year", "month" and "day". Returns
        None if the text does not use this family's layout at all.
        """

    def parse(self, text: str) -> UncertainDate | None:
        """Parse text written in this family.

        Returns:
            The parsed value, or None if the text does not use this family's layout

        Raises:
            FormatError: If the layout matches but the fields are not an allowed
                combination or do not form a valid calendar date
        """
        m = self.match_layout(text)
        if m is None:
            return None

        shape = tuple(field_shape(m.group(name)) for name in ("year", "month", "day"))
        precision = self.shapes.get(shape)
        if precision is None:
            position = self._first_offending_position(m, shape)
            logger.debug(f"Rejected {self.family} date {text!r}: field shape {shape}")
            raise FormatError(
                f"Unsupported combination of known and unknown fields in {self.family} date",
                text,
                position,
            )

        value = self._build(precision, m, text)
        logger.debug(f"Parsed {self.family} date {text!r} with precision {precision.value}")
        return value

    def _build(self, precision: Precision, m: re.Match, text: str) -> UncertainDate:
        if precision is Precision.EMPTY:
            return UncertainDate.empty()

        known = _KNOWN_FIELDS[precision]
        values = [int(m.group(name)) for name in known]

        # Build field by field so the error points at the first invalid one
        value = None
        for count in range(1, len(known) + 1):
            try:
                value = _CONSTRUCTORS[count](*values[:count])
            except CalendarError as e:
                name = known[count - 1]
                logger.debug(f"Rejected {self.family} date {text!r}: invalid {name}")
                raise FormatError(f"Invalid {name} in {self.family} date", text, m.start(name)) from e
        return value

    def _first_offending_position(self, m: re.Match, shape: Shape) -> int:
        """Position of the first field, in text order, that no allowed shape explains."""
        by_name = dict(zip(("year", "month", "day"), shape))
        actual = [by_name[name] for name in self.field_order]

        best = 0
        for allowed in self.shapes:
            allowed_by_name = dict(zip(("year", "month", "day"), allowed))
            expected = [allowed_by_name[name] for name in self.field_order]
            matched = 0
            while matched < len(actual) and actual[matched] == expected[matched]:
                matched += 1
            best = max(best, matched)

        return m.start(self.field_order[min(best, len(self.field_order) - 1)])
