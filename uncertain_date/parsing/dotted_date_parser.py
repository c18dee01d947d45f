"""Parser for dotted day-month-year dates."""

import re

from uncertain_date.parsing.strategy import FieldShape, UncertainDateParserStrategy
from uncertain_date.precision import Precision

X, ZERO, NUMBER = FieldShape.X, FieldShape.ZERO, FieldShape.NUMBER


class DottedDateParser(UncertainDateParserStrategy):
    """Parses dates in dd.MM.yyyy order.

    Unknown fields are written with either ``0`` or ``x``, but one string
    uses only one of the two:

        00.00.0000  xx.xx.xxxx   nothing known
        00.00.2017  xx.xx.2017   year
        00.08.2017  xx.08.2017   year and month
        10.08.2017               full date
    """

    family = "dotted"
    field_order = ("day", "month", "year")

    # Keys are (year, month, day)
    shapes = {
        (ZERO, ZERO, ZERO): Precision.EMPTY,
        (NUMBER, ZERO, ZERO): Precision.YEAR,
        (NUMBER, NUMBER, ZERO): Precision.YEAR_MONTH,
        (X, X, X): Precision.EMPTY,
        (NUMBER, X, X): Precision.YEAR,
        (NUMBER, NUMBER, X): Precision.YEAR_MONTH,
        (NUMBER, NUMBER, NUMBER): Precision.FULL,
    }

    _LAYOUT_RE = re.compile(
        r"(?P<day>[0-9]{2}|xx)\.(?P<month>[0-9]{2}|xx)\.(?P<year>[0-9]{4}|xxxx)"
    )

    def match_layout(self, text: str) -> re.Match | None:
        return self._LAYOUT_RE.fullmatch(text)
