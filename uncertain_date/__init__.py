"""
Uncertain dates

A date whose year, month or day may be unknown, as found in administrative
records ("born in 1966", "died in May 1990"). Provides:
- UncertainDate, an immutable value stored as an inclusive date range
- Parsing of the dotted (xx.05.1966) and ISO (1966-05-xx) text forms
- Formatting back into both forms
- A JSON schema validated record form
"""

from uncertain_date.errors import (
    CalendarError,
    FormatError,
    NullArgumentError,
    RangeError,
    SerializationError,
    UncertainDateError,
)
from uncertain_date.precision import Precision
from uncertain_date.uncertain_date import UncertainDate
from uncertain_date.formatting import DateStyle, format_date, format_dotted, format_iso
from uncertain_date.parsing import UncertainDateParser
from uncertain_date.serialization import from_dict, to_dict, validate_uncertain_date_dict
from uncertain_date.config import FormatConfig, load_format_config

parse = UncertainDateParser.parse

__all__ = [
    "CalendarError",
    "DateStyle",
    "FormatConfig",
    "FormatError",
    "NullArgumentError",
    "Precision",
    "RangeError",
    "SerializationError",
    "UncertainDate",
    "UncertainDateError",
    "UncertainDateParser",
    "format_date",
    "format_dotted",
    "format_iso",
    "from_dict",
    "load_format_config",
    "parse",
    "to_dict",
    "validate_uncertain_date_dict",
]
