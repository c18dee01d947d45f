"""Parsers for the dotted and ISO text forms of uncertain dates."""

from uncertain_date.parsing.strategy import FieldShape, UncertainDateParserStrategy
from uncertain_date.parsing.factory import UncertainDateParsers, UncertainDateParserFactory
from uncertain_date.parsing.date_parser import UncertainDateParser

__all__ = [
    "FieldShape",
    "UncertainDateParser",
    "UncertainDateParserStrategy",
    "UncertainDateParsers",
    "UncertainDateParserFactory",
]
