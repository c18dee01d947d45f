"""Parser for ISO style year-month-day dates."""

import re

from uncertain_date.parsing.strategy import FieldShape, UncertainDateParserStrategy
from uncertain_date.precision import Precision

X, NUMBER = FieldShape.X, FieldShape.NUMBER


class IsoDateParser(UncertainDateParserStrategy):
    """Parses dates in yyyy-MM-dd order.

    Unknown fields are only ever written with ``x``:

        xxxx-xx-xx   nothing known
        2017-xx-xx   year
        2017-08-xx   year and month
        2017-08-10   full date
    """

    family = "ISO"
    field_order = ("year", "month", "day")

    # Keys are (year, month, day)
    shapes = {
        (X, X, X): Precision.EMPTY,
        (NUMBER, X, X): Precision.YEAR,
        (NUMBER, NUMBER, X): Precision.YEAR_MONTH,
        (NUMBER, NUMBER, NUMBER): Precision.FULL,
    }

    _LAYOUT_RE = re.compile(
        r"(?P<year>[0-9]{4}|xxxx)-(?P<month>[0-9]{2}|xx)-(?P<day>[0-9]{2}|xx)"
    )

    def match_layout(self, text: str) -> re.Match | None:
        return self._LAYOUT_RE.fullmatch(text)
